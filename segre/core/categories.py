"""
File categories and the extension to category lookup.
"""

from datetime import datetime
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional

CategoryMap = Mapping[str, FrozenSet[str]]

FALLBACK_CATEGORY = "Others"

# Order matters: the first category listing an extension wins.
DEFAULT_CATEGORIES: CategoryMap = MappingProxyType(
    {
        "Archives": frozenset(
            {".zip", ".tar", ".gz", ".rar", ".7z", ".bz2", ".xz"}
        ),
        "Audio": frozenset({".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma", ".m4a"}),
        "Code": frozenset(
            {
                ".js",
                ".ts",
                ".css",
                ".html",
                ".py",
                ".java",
                ".cpp",
                ".c",
                ".h",
                ".jsx",
                ".tsx",
                ".vue",
                ".rb",
                ".go",
                ".rs",
                ".php",
                ".swift",
                ".kt",
            }
        ),
        "Documents": frozenset(
            {
                ".pdf",
                ".doc",
                ".docx",
                ".xls",
                ".xlsx",
                ".ppt",
                ".pptx",
                ".txt",
                ".rtf",
                ".odt",
                ".ods",
                ".odp",
                ".md",
                ".csv",
            }
        ),
        "Images": frozenset(
            {
                ".jpg",
                ".jpeg",
                ".png",
                ".gif",
                ".bmp",
                ".tiff",
                ".svg",
                ".webp",
                ".ico",
                ".raw",
                ".psd",
                ".ai",
            }
        ),
        "Videos": frozenset(
            {
                ".mp4",
                ".mkv",
                ".avi",
                ".mov",
                ".wmv",
                ".flv",
                ".webm",
                ".m4v",
                ".mpeg",
                ".mpg",
            }
        ),
        "Executables": frozenset(
            {".exe", ".msi", ".dmg", ".app", ".deb", ".rpm", ".sh", ".bat", ".cmd"}
        ),
        "Fonts": frozenset({".ttf", ".otf", ".woff", ".woff2", ".eot"}),
        FALLBACK_CATEGORY: frozenset(),
    }
)

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def resolve_category(
    extension: Optional[str], categories: CategoryMap = DEFAULT_CATEGORIES
) -> str:
    """
    Get the category for a file extension.

    Args:
        extension: File extension including the dot (e.g. ".pdf"), may be empty
        categories: Ordered category mapping

    Returns:
        Name of the first category containing the extension, or the
        fallback category
    """
    if not extension:
        return FALLBACK_CATEGORY

    extension = extension.lower()
    for category, extensions in categories.items():
        if extension in extensions:
            return category

    return FALLBACK_CATEGORY


def month_abbreviation(date: datetime) -> str:
    """Three-letter English month name, independent of the locale."""
    return MONTH_ABBREVIATIONS[date.month - 1]
