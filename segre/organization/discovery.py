"""
Discovery of files to organize.

Walks the target directory, skipping the operation log, ignored paths and
folders that are already organize output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Collection, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..shared.file_utils import should_ignore
from .transaction import LOG_FILE_NAME

logger = logging.getLogger(__name__)


class FileEntry(BaseModel):
    """Snapshot of a file found during discovery."""

    name: str = Field(description="File name")
    path: Path = Field(description="Absolute file path")
    modified: datetime = Field(description="Last modification time (local)")
    is_dir: bool = Field(default=False, description="Whether entry is a directory")

    model_config = ConfigDict(frozen=True)

    @property
    def extension(self) -> str:
        """Lower-cased extension including the dot, or empty string."""
        return self.path.suffix.lower()


def discover_files(
    root: Path,
    category_folders: Collection[str],
    ignore_patterns: Sequence[str] = (),
    recursive: bool = False,
) -> List[FileEntry]:
    """
    Collect the files under root that should be organized.

    Args:
        root: Directory to scan
        category_folders: Folder names treated as organize output
        ignore_patterns: Ignore rules (exact name, path fragment or ``*.ext``)
        recursive: If True, descend into subdirectories

    Returns:
        File entries in traversal order
    """
    entries: List[FileEntry] = []
    _scan_directory(
        _list_directory(Path(root)),
        set(category_folders),
        ignore_patterns,
        recursive,
        entries,
    )
    logger.info(f"Found {len(entries)} files to organize in {root}")
    return entries


def _list_directory(directory: Path) -> List[Path]:
    return sorted(directory.iterdir(), key=lambda p: p.name)


def _scan_directory(
    paths: List[Path],
    category_folders: Collection[str],
    ignore_patterns: Sequence[str],
    recursive: bool,
    entries: List[FileEntry],
) -> None:
    for path in paths:
        name = path.name

        if name == LOG_FILE_NAME:
            continue

        if should_ignore(path, ignore_patterns):
            logger.debug(f"Ignoring: {path}")
            continue

        if name in category_folders:
            logger.debug(f"Skipping category folder: {path}")
            continue

        if path.is_symlink() and path.is_dir():
            logger.debug(f"Skipping symlinked directory: {path}")
            continue

        if path.is_file():
            stat = path.stat()
            entries.append(
                FileEntry(
                    name=name,
                    path=path,
                    modified=datetime.fromtimestamp(stat.st_mtime),
                )
            )
        elif path.is_dir() and recursive:
            try:
                children = _list_directory(path)
            except OSError as e:
                logger.warning(f"Skipping unreadable directory {path}: {e}")
                continue
            _scan_directory(
                children, category_folders, ignore_patterns, recursive, entries
            )

