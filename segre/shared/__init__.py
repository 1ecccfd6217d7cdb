"""
Shared utilities for segre.
"""

from .file_utils import (
    get_unique_path,
    parse_ignore_patterns,
    setup_logging,
    should_ignore,
)

__all__ = [
    "get_unique_path",
    "parse_ignore_patterns",
    "setup_logging",
    "should_ignore",
]
