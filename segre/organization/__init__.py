"""
Organization module for moving files into category or date folders.

Handles discovery, placement, conflict-free moves, the undo log and cleanup
of directories left empty.
"""

from .cleanup import (
    prune_empty_directories,
    remove_empty_category_folders,
    remove_empty_parents,
)
from .discovery import FileEntry, discover_files
from .file_organizer import (
    FileOrganizer,
    OrganizationResult,
    RunMode,
    UndoResult,
    organize_directory,
    undo_organize,
)
from .strategy import OrganizationMode, OrganizationStrategy
from .transaction import (
    LOG_FILE_NAME,
    Batch,
    MoveOperation,
    OperationLog,
    append_batch,
    get_log_path,
    read_log,
    replace_log,
)

__all__ = [
    "prune_empty_directories",
    "remove_empty_category_folders",
    "remove_empty_parents",
    "FileEntry",
    "discover_files",
    "FileOrganizer",
    "OrganizationResult",
    "RunMode",
    "UndoResult",
    "organize_directory",
    "undo_organize",
    "OrganizationMode",
    "OrganizationStrategy",
    "LOG_FILE_NAME",
    "Batch",
    "MoveOperation",
    "OperationLog",
    "append_batch",
    "get_log_path",
    "read_log",
    "replace_log",
]
