"""
Error types raised by segre.

Precondition errors abort a run before anything on disk is touched.
Per-file failures never raise; they are counted in the run result instead.
"""

from pathlib import Path
from typing import Optional, Union


class SegreError(Exception):
    """Base class for all segre errors."""


class InvalidTargetError(SegreError, ValueError):
    """Target directory argument is missing or blank."""


class TargetNotFoundError(SegreError, FileNotFoundError):
    """Target directory does not exist."""


class TargetNotADirectoryError(SegreError, NotADirectoryError):
    """Target path exists but is not a directory."""


class ConfigError(SegreError, ValueError):
    """Category configuration could not be used."""


class ConfigParseError(ConfigError):
    """Category configuration file is not valid JSON."""


class ConfigShapeError(ConfigError):
    """Top level of the category configuration is not an object."""


class CategoryNameError(ConfigError):
    """A category name cannot be used as a folder name."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f'Category name "{category}" is not a valid folder name')


class CategoryShapeError(ConfigError):
    """A category maps to something other than an array of extensions."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f'Category "{category}" must have an array of extensions')


class ExtensionTypeError(ConfigError):
    """A category's extension list contains a non-string entry."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f'Extensions in "{category}" must be strings')


def validate_target_directory(target: Optional[Union[str, Path]]) -> Path:
    """
    Check a target directory argument and return its absolute path.

    Args:
        target: Directory given by the caller

    Returns:
        Resolved absolute path of the directory

    Raises:
        InvalidTargetError: If target is None or blank
        TargetNotFoundError: If the directory does not exist
        TargetNotADirectoryError: If the path is not a directory
    """
    if target is None or not str(target).strip():
        raise InvalidTargetError("Target directory must be a non-empty string")

    path = Path(target).expanduser().resolve()

    if not path.exists():
        raise TargetNotFoundError(f"Directory does not exist: {path}")

    if not path.is_dir():
        raise TargetNotADirectoryError(f"Path is not a directory: {path}")

    return path
