"""Tests for file discovery."""

from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from segre.core.categories import DEFAULT_CATEGORIES
from segre.organization.discovery import FileEntry, discover_files
from segre.organization.transaction import LOG_FILE_NAME

CATEGORY_FOLDERS = list(DEFAULT_CATEGORIES)


def _names(entries):
    return [entry.name for entry in entries]


class TestDiscoverFiles:
    """Test discovery rules."""

    def test_collects_plain_files(self, target_dir, make_file):
        """Test that plain files at the root are collected."""
        make_file(target_dir / "b.txt")
        make_file(target_dir / "a.jpg")

        entries = discover_files(target_dir, CATEGORY_FOLDERS)

        assert _names(entries) == ["a.jpg", "b.txt"]
        assert all(isinstance(entry, FileEntry) for entry in entries)
        assert entries[0].path == target_dir / "a.jpg"
        assert entries[0].is_dir is False

    def test_modified_time(self, target_dir, make_file):
        """Test that entries carry the file modification time."""
        make_file(target_dir / "a.txt", modified=datetime(2024, 3, 15, 12, 0, 0))

        entries = discover_files(target_dir, CATEGORY_FOLDERS)

        assert entries[0].modified == datetime(2024, 3, 15, 12, 0, 0)

    def test_skips_log_file(self, target_dir, make_file):
        """Test that the operation log is never collected."""
        make_file(target_dir / LOG_FILE_NAME, "[]")
        make_file(target_dir / "a.txt")

        entries = discover_files(target_dir, CATEGORY_FOLDERS)

        assert _names(entries) == ["a.txt"]

    def test_skips_ignored(self, target_dir, make_file):
        """Test that ignore patterns are applied."""
        make_file(target_dir / "keep.txt")
        make_file(target_dir / "debug.log")
        make_file(target_dir / "notes.md")

        entries = discover_files(target_dir, CATEGORY_FOLDERS, ["*.log", "notes.md"])

        assert _names(entries) == ["keep.txt"]

    def test_non_recursive_ignores_subdirectories(self, target_dir, make_file):
        """Test that subdirectories are not entered by default."""
        make_file(target_dir / "sub" / "nested.txt")
        make_file(target_dir / "top.txt")

        entries = discover_files(target_dir, CATEGORY_FOLDERS)

        assert _names(entries) == ["top.txt"]

    def test_recursive(self, target_dir, make_file):
        """Test that recursive discovery descends into subdirectories."""
        make_file(target_dir / "sub" / "deeper" / "nested.txt")
        make_file(target_dir / "top.txt")

        entries = discover_files(target_dir, CATEGORY_FOLDERS, recursive=True)

        assert sorted(_names(entries)) == ["nested.txt", "top.txt"]

    def test_skips_category_folders(self, target_dir, make_file):
        """Test that existing category folders are not organize input."""
        make_file(target_dir / "Images" / "old.jpg")
        make_file(target_dir / "new.jpg")

        entries = discover_files(target_dir, CATEGORY_FOLDERS, recursive=True)

        assert _names(entries) == ["new.jpg"]

    def test_skips_category_folders_at_every_level(self, target_dir, make_file):
        """Test that nested category folders are skipped when recursive."""
        make_file(target_dir / "sub" / "Documents" / "inner.pdf")
        make_file(target_dir / "sub" / "outer.pdf")

        entries = discover_files(target_dir, CATEGORY_FOLDERS, recursive=True)

        assert _names(entries) == ["outer.pdf"]

    def test_ignored_directory_not_entered(self, target_dir, make_file):
        """Test that ignored directories are skipped entirely."""
        make_file(target_dir / "node_modules" / "pkg.js")
        make_file(target_dir / "app.js")

        entries = discover_files(
            target_dir, CATEGORY_FOLDERS, ["node_modules"], recursive=True
        )

        assert _names(entries) == ["app.js"]

    def test_unreadable_subdirectory_skipped(self, target_dir, make_file):
        """Test that a subdirectory that cannot be listed is skipped."""
        make_file(target_dir / "locked" / "hidden.txt")
        make_file(target_dir / "open" / "visible.txt")
        make_file(target_dir / "top.txt")
        real_iterdir = Path.iterdir

        def iterdir(self):
            if self.name == "locked":
                raise PermissionError("denied")
            return real_iterdir(self)

        with patch.object(
            Path, "iterdir", autospec=True, side_effect=iterdir
        ):
            entries = discover_files(target_dir, CATEGORY_FOLDERS, recursive=True)

        assert _names(entries) == ["visible.txt", "top.txt"]

    def test_unreadable_root_raises(self, target_dir):
        """Test that failing to list the root directory propagates."""
        with patch.object(Path, "iterdir", side_effect=PermissionError("denied")):
            with pytest.raises(PermissionError):
                discover_files(target_dir, CATEGORY_FOLDERS)

    def test_empty_directory(self, target_dir):
        """Test discovering nothing."""
        assert discover_files(target_dir, CATEGORY_FOLDERS) == []


class TestFileEntry:
    """Test the file entry model."""

    def test_extension_lowercased(self, tmp_path):
        """Test that extension is lower-cased."""
        entry = FileEntry(
            name="PHOTO.JPG", path=tmp_path / "PHOTO.JPG", modified=datetime.now()
        )

        assert entry.extension == ".jpg"

    def test_no_extension(self, tmp_path):
        """Test files without extension."""
        entry = FileEntry(
            name="Makefile", path=tmp_path / "Makefile", modified=datetime.now()
        )

        assert entry.extension == ""
