"""Tests for target directory validation."""

import pytest

from segre.core.errors import (
    InvalidTargetError,
    SegreError,
    TargetNotADirectoryError,
    TargetNotFoundError,
    validate_target_directory,
)


class TestValidateTargetDirectory:
    """Test precondition checks on the target directory."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_target(self, value):
        """Test that blank targets are invalid arguments."""
        with pytest.raises(InvalidTargetError):
            validate_target_directory(value)

    def test_missing_directory(self, tmp_path):
        """Test that a missing directory raises a not-found error."""
        with pytest.raises(TargetNotFoundError):
            validate_target_directory(tmp_path / "missing")

    def test_not_a_directory(self, tmp_path):
        """Test that a file path raises a not-a-directory error."""
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        with pytest.raises(TargetNotADirectoryError):
            validate_target_directory(file_path)

    def test_returns_absolute_path(self, tmp_path, monkeypatch):
        """Test that relative paths are resolved."""
        (tmp_path / "sub").mkdir()
        monkeypatch.chdir(tmp_path)

        result = validate_target_directory("sub")

        assert result.is_absolute()
        assert result == (tmp_path / "sub").resolve()

    def test_error_hierarchy(self):
        """Test that errors match both segre and builtin types."""
        assert issubclass(InvalidTargetError, ValueError)
        assert issubclass(TargetNotFoundError, FileNotFoundError)
        assert issubclass(TargetNotADirectoryError, NotADirectoryError)
        targets = (InvalidTargetError, TargetNotFoundError, TargetNotADirectoryError)
        for error in targets:
            assert issubclass(error, SegreError)
