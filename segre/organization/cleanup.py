"""
Best-effort removal of directories left empty by organize or undo.

Failures here are logged and swallowed: an empty directory left behind is
harmless, and the operation log does not depend on it.
"""

import logging
from pathlib import Path
from typing import Collection, Iterable

logger = logging.getLogger(__name__)


def _remove_if_empty(directory: Path) -> bool:
    try:
        if any(directory.iterdir()):
            return False
        directory.rmdir()
    except OSError as e:
        logger.debug(f"Could not remove {directory}: {e}")
        return False

    logger.debug(f"Removed empty directory {directory}")
    return True


def prune_empty_directories(directory: Path, category_folders: Collection[str]) -> int:
    """
    Remove subdirectories emptied by a recursive organize.

    Category folders are neither entered nor removed.

    Args:
        directory: Directory to prune below (itself never removed)
        category_folders: Folder names to leave alone

    Returns:
        Number of directories removed
    """
    removed = 0

    try:
        children = [
            child
            for child in directory.iterdir()
            if child.is_dir() and not child.is_symlink()
        ]
    except OSError as e:
        logger.debug(f"Could not list {directory}: {e}")
        return removed

    for child in children:
        if child.name in category_folders:
            continue
        removed += prune_empty_directories(child, category_folders)
        if _remove_if_empty(child):
            removed += 1

    return removed


def remove_empty_category_folders(
    target_dir: Path, category_folders: Iterable[str]
) -> int:
    """
    Remove category folders directly under target_dir that are now empty.

    Returns:
        Number of folders removed
    """
    removed = 0
    for name in category_folders:
        folder = target_dir / name
        if folder.is_dir() and _remove_if_empty(folder):
            removed += 1
    return removed


def remove_empty_parents(path: Path, stop_at: Path) -> int:
    """
    Remove empty ancestors of path, walking up to (not including) stop_at.

    Stops at the first directory that is not empty or cannot be removed.

    Returns:
        Number of directories removed
    """
    removed = 0
    stop_at = Path(stop_at)
    directory = Path(path).parent

    while directory != stop_at and stop_at in directory.parents:
        if not directory.is_dir() or not _remove_if_empty(directory):
            break
        removed += 1
        directory = directory.parent

    return removed
