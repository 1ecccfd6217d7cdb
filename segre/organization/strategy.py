"""
Placement strategies for organizing files.

Decides which folder under the target root a file belongs in: a category
folder chosen by extension, or a year/month folder chosen by modification
time.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field

from ..core.categories import DEFAULT_CATEGORIES, month_abbreviation, resolve_category
from .discovery import FileEntry


class OrganizationMode(str, Enum):
    """How destination folders are chosen."""

    CATEGORY = "category"  # root/Images/photo.jpg
    DATE = "date"  # root/2024/Mar/photo.jpg


class OrganizationStrategy(BaseModel):
    """Strategy for placing files."""

    mode: OrganizationMode = Field(
        default=OrganizationMode.CATEGORY,
        description="Folder layout",
    )

    categories: Dict[str, FrozenSet[str]] = Field(
        default_factory=lambda: dict(DEFAULT_CATEGORIES),
        description="Ordered category name to extensions mapping",
    )

    model_config = ConfigDict(use_enum_values=True)

    @property
    def category_folders(self) -> List[str]:
        """Names of folders that hold organize output."""
        return list(self.categories)

    def get_target_directory(self, root: Path, entry: FileEntry) -> Path:
        """
        Get the destination directory for a file.

        Args:
            root: Target root directory
            entry: File to place

        Returns:
            Destination directory path
        """
        if self.mode == OrganizationMode.DATE:
            date = entry.modified
            return root / str(date.year) / month_abbreviation(date)

        return root / resolve_category(entry.extension, self.categories)

    def get_target_path(self, root: Path, entry: FileEntry) -> Path:
        """Desired destination path, before conflict resolution."""
        return self.get_target_directory(root, entry) / entry.name
