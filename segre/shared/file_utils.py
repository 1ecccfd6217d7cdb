"""
File utilities shared by organize and undo.

Conflict-free destination naming, ignore pattern matching and logging setup.
"""

import logging
from pathlib import Path
from typing import Collection, List, Optional, Sequence


def get_unique_path(target_path: Path, reserved: Collection[Path] = ()) -> Path:
    """
    Get a path that does not collide with anything on disk.

    If the target is free it is returned unchanged. Otherwise a counter is
    inserted between the stem and the extension: ``a.txt`` becomes
    ``a(1).txt``, then ``a(2).txt`` and so on.

    Args:
        target_path: Desired destination path
        reserved: Paths to treat as taken even though they are not on disk

    Returns:
        First candidate path that is free
    """
    target_path = Path(target_path)

    if not _is_taken(target_path, reserved):
        return target_path

    parent = target_path.parent
    stem = target_path.stem
    suffix = target_path.suffix

    counter = 1
    while True:
        candidate = parent / f"{stem}({counter}){suffix}"
        if not _is_taken(candidate, reserved):
            return candidate
        counter += 1


def _is_taken(path: Path, reserved: Collection[Path]) -> bool:
    # dangling symlinks count as taken
    return path in reserved or path.exists() or path.is_symlink()


def parse_ignore_patterns(value: Optional[str]) -> List[str]:
    """Split a comma-separated pattern string, dropping blank entries."""
    if not value:
        return []
    return [pattern.strip() for pattern in value.split(",") if pattern.strip()]


def should_ignore(file_path: Path, ignore_patterns: Sequence[str]) -> bool:
    """
    Check if a path matches any ignore pattern.

    A pattern is either ``*.ext`` (matches the file name suffix), an exact
    file name, or a fragment matched anywhere in the full path.

    Args:
        file_path: Path to check
        ignore_patterns: Patterns to match against

    Returns:
        True if the path should be ignored
    """
    if not ignore_patterns:
        return False

    name = file_path.name
    full_path = str(file_path)
    for pattern in ignore_patterns:
        if pattern.startswith("*."):
            if name.endswith(pattern[1:]):
                return True
        elif name == pattern or pattern in full_path:
            return True

    return False


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
