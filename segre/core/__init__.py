"""
Core definitions: categories, category configuration and errors.
"""

from .categories import (
    DEFAULT_CATEGORIES,
    FALLBACK_CATEGORY,
    CategoryMap,
    month_abbreviation,
    resolve_category,
)
from .config import (
    SAMPLE_CONFIG,
    SegreSettings,
    generate_sample_config,
    load_categories,
    merge_categories,
    validate_category_config,
)
from .errors import (
    CategoryNameError,
    CategoryShapeError,
    ConfigError,
    ConfigParseError,
    ConfigShapeError,
    ExtensionTypeError,
    InvalidTargetError,
    SegreError,
    TargetNotADirectoryError,
    TargetNotFoundError,
    validate_target_directory,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "FALLBACK_CATEGORY",
    "CategoryMap",
    "month_abbreviation",
    "resolve_category",
    "SAMPLE_CONFIG",
    "SegreSettings",
    "generate_sample_config",
    "load_categories",
    "merge_categories",
    "validate_category_config",
    "CategoryNameError",
    "CategoryShapeError",
    "ConfigError",
    "ConfigParseError",
    "ConfigShapeError",
    "ExtensionTypeError",
    "InvalidTargetError",
    "SegreError",
    "TargetNotADirectoryError",
    "TargetNotFoundError",
    "validate_target_directory",
]
