"""
Category configuration loading and application settings.

Custom categories are read from a JSON object mapping a category name to a
list of extensions. They are validated, then merged over the built-in
defaults by key; the defaults themselves are never modified.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..shared.file_utils import parse_ignore_patterns
from .categories import DEFAULT_CATEGORIES, CategoryMap
from .errors import (
    CategoryNameError,
    CategoryShapeError,
    ConfigError,
    ConfigParseError,
    ConfigShapeError,
    ExtensionTypeError,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE_NAME = "segre.config.json"

SAMPLE_CONFIG: Dict[str, List[str]] = {
    "Images": [".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp"],
    "Documents": [".pdf", ".doc", ".docx", ".txt", ".md"],
    "Audio": [".mp3", ".wav", ".flac", ".aac"],
    "Videos": [".mp4", ".mkv", ".avi", ".mov"],
    "Code": [".js", ".ts", ".py", ".java", ".cpp", ".html", ".css"],
    "Archives": [".zip", ".rar", ".7z", ".tar", ".gz"],
    "Others": [],
}


class SegreSettings(BaseSettings):
    """Defaults read from SEGRE_* environment variables or a .env file."""

    config: Optional[Path] = None
    ignore: str = ""
    recursive: bool = False

    @property
    def ignore_patterns(self) -> List[str]:
        """Ignore patterns parsed from the comma-separated setting."""
        return parse_ignore_patterns(self.ignore)

    model_config = SettingsConfigDict(
        env_prefix="SEGRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def _is_folder_name(name: str) -> bool:
    if not name.strip() or name in (".", ".."):
        return False
    return "/" not in name and "\\" not in name


def validate_category_config(data: Any) -> Dict[str, List[str]]:
    """
    Validate the shape of a parsed category configuration.

    Args:
        data: Parsed JSON value

    Returns:
        Category name to lower-cased extension list, in file order

    Raises:
        ConfigShapeError: If data is not an object
        CategoryNameError: If a category name is not a plain folder name
        CategoryShapeError: If a category value is not an array
        ExtensionTypeError: If an extension entry is not a string
    """
    if not isinstance(data, dict):
        raise ConfigShapeError("Config must be a valid JSON object")

    validated: Dict[str, List[str]] = {}
    for category, extensions in data.items():
        if not _is_folder_name(category):
            raise CategoryNameError(category)
        if not isinstance(extensions, list):
            raise CategoryShapeError(category)
        for extension in extensions:
            if not isinstance(extension, str):
                raise ExtensionTypeError(category)
        validated[category] = [extension.lower() for extension in extensions]

    return validated


def merge_categories(
    overrides: Dict[str, List[str]], defaults: CategoryMap = DEFAULT_CATEGORIES
) -> Dict[str, frozenset]:
    """
    Merge custom categories over the defaults.

    Same-named categories are replaced in place; new categories are
    appended after the defaults.

    Args:
        overrides: Validated custom categories
        defaults: Base category mapping (left untouched)

    Returns:
        New ordered category mapping
    """
    merged = {name: frozenset(extensions) for name, extensions in defaults.items()}
    for name, extensions in overrides.items():
        merged[name] = frozenset(extensions)
    return merged


def load_categories(config_path: Optional[Union[str, Path]] = None) -> CategoryMap:
    """
    Load the category mapping, optionally from a JSON config file.

    Args:
        config_path: Path to a custom categories file, or None for defaults

    Returns:
        Ordered category mapping

    Raises:
        ConfigError: If the path is blank or the file is invalid
        OSError: If the file cannot be read
    """
    if config_path is None:
        return DEFAULT_CATEGORIES

    if not str(config_path).strip():
        raise ConfigError("Config path must be a non-empty string")

    path = Path(config_path).expanduser()
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e

    categories = merge_categories(validate_category_config(data))
    logger.debug(f"Loaded {len(categories)} categories from {path}")
    return categories


def generate_sample_config(
    output_path: Union[str, Path] = DEFAULT_CONFIG_FILE_NAME, overwrite: bool = False
) -> Dict[str, List[str]]:
    """
    Write a sample category config file.

    Args:
        output_path: Where to write the file
        overwrite: Replace an existing file instead of refusing

    Returns:
        The sample configuration that was written

    Raises:
        ConfigError: If the path is blank
        FileExistsError: If the file exists and overwrite is False
    """
    if not str(output_path).strip():
        raise ConfigError("Output path must be a non-empty string")

    path = Path(output_path).expanduser()
    if path.exists() and not overwrite:
        raise FileExistsError(f"Config file already exists: {path}")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(SAMPLE_CONFIG, f, indent=2)

    logger.info(f"Sample config created: {path}")
    return SAMPLE_CONFIG
