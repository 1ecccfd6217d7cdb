"""
File organizer: moves files into category or date folders and undoes it.

Files are processed one at a time in discovery order. A move is recorded
only after it has completed on disk, and each conflict check runs after the
previous move, so no two files can be given the same destination.
"""

import logging
import shutil
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Set, Tuple, Union

from pydantic import BaseModel, Field
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeRemainingColumn,
)

from ..core.config import load_categories
from ..core.errors import validate_target_directory
from ..shared.file_utils import get_unique_path, parse_ignore_patterns
from .cleanup import (
    prune_empty_directories,
    remove_empty_category_folders,
    remove_empty_parents,
)
from .discovery import FileEntry, discover_files
from .strategy import OrganizationMode, OrganizationStrategy
from .transaction import MoveOperation, append_batch, read_log, replace_log

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[Path, Path], bool]


class RunMode(str, Enum):
    """How an organize run treats the file system."""

    MOVE = "move"
    DRY_RUN = "dry_run"  # report only
    INTERACTIVE = "interactive"  # ask before each move


class OrganizationResult(BaseModel):
    """Result of an organize run."""

    total_files: int = 0
    moved: int = 0
    skipped: int = 0
    failed: int = 0
    already_organized: int = 0
    dry_run: bool = False
    operations: List[MoveOperation] = Field(default_factory=list)
    planned: List[Tuple[Path, Path]] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    batch_timestamp: Optional[datetime] = None


class UndoResult(BaseModel):
    """Result of an undo run."""

    restored: int = 0
    errors: int = 0
    nothing_to_undo: bool = False
    message: Optional[str] = None
    batch_timestamp: Optional[datetime] = None
    error_messages: List[str] = Field(default_factory=list)


class FileOrganizer:
    """Organize a directory according to a strategy, with undo."""

    def __init__(
        self,
        target_directory: Union[str, Path],
        strategy: Optional[OrganizationStrategy] = None,
        ignore_patterns: Sequence[str] = (),
        recursive: bool = False,
        mode: RunMode = RunMode.MOVE,
        confirm: Optional[ConfirmCallback] = None,
        show_progress: bool = False,
    ):
        """
        Initialize file organizer.

        Args:
            target_directory: Directory to organize
            strategy: Placement strategy (category mode with defaults if None)
            ignore_patterns: Ignore rules applied during discovery
            recursive: Also organize files in subdirectories
            mode: Move, dry run, or interactive
            confirm: Called with (source, destination) in interactive mode;
                returning False skips the file
            show_progress: Render a progress bar while moving

        Raises:
            SegreError: If the target directory is invalid
            ValueError: If interactive mode is requested without confirm
        """
        self.target_directory = validate_target_directory(target_directory)
        self.strategy = strategy or OrganizationStrategy()
        self.ignore_patterns = list(ignore_patterns)
        self.recursive = recursive
        self.mode = RunMode(mode)
        self.confirm = confirm
        self.show_progress = show_progress

        if self.mode == RunMode.INTERACTIVE and confirm is None:
            raise ValueError("Interactive mode requires a confirm callback")

    def discover(self) -> List[FileEntry]:
        """Find the files this organizer would process."""
        return discover_files(
            self.target_directory,
            self.strategy.category_folders,
            self.ignore_patterns,
            self.recursive,
        )

    def organize(self, entries: Optional[List[FileEntry]] = None) -> OrganizationResult:
        """
        Organize files according to the strategy.

        Args:
            entries: Files to process (discovered from the target if None)

        Returns:
            Organization result with statistics
        """
        dry_run = self.mode == RunMode.DRY_RUN
        logger.info(
            f"Organizing {self.target_directory} "
            f"({'DRY RUN' if dry_run else self.mode.value}, "
            f"by {OrganizationMode(self.strategy.mode).value}, "
            f"recursive={self.recursive})"
        )

        if entries is None:
            entries = self.discover()

        result = OrganizationResult(total_files=len(entries), dry_run=dry_run)
        reserved: Set[Path] = set()

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeRemainingColumn(),
            disable=not self.show_progress or self.mode != RunMode.MOVE,
        ) as progress:
            task = progress.add_task("Organizing files...", total=len(entries))

            try:
                for entry in entries:
                    self._process_entry(entry, result, reserved)
                    progress.advance(task)
            finally:
                # an aborted run still records the moves it made
                if result.operations and not dry_run:
                    self._save_batch(result)

        logger.info(
            f"Organization complete: moved={result.moved} skipped={result.skipped} "
            f"failed={result.failed} already_organized={result.already_organized}"
        )
        return result

    def _save_batch(self, result: OrganizationResult) -> None:
        """Append the run's moves to the operation log and prune if recursive."""
        batch = append_batch(self.target_directory, result.operations)
        result.batch_timestamp = batch.timestamp

        if self.recursive:
            prune_empty_directories(
                self.target_directory, self.strategy.category_folders
            )

    def _process_entry(
        self, entry: FileEntry, result: OrganizationResult, reserved: Set[Path]
    ) -> None:
        """
        Process a single file, updating result in place.

        Reserved collects dry-run destinations so that a preview never hands
        the same path to two files.
        """
        target_dir = self.strategy.get_target_directory(self.target_directory, entry)

        if entry.path.parent == target_dir:
            logger.debug(f"Skipping {entry.path}: already organized")
            result.already_organized += 1
            return

        try:
            destination = get_unique_path(target_dir / entry.name, reserved)

            if self.mode == RunMode.DRY_RUN:
                logger.info(f"[DRY RUN] Would move {entry.path} → {destination}")
                result.planned.append((entry.path, destination))
                reserved.add(destination)
                return

            if self.mode == RunMode.INTERACTIVE and not self.confirm(
                entry.path, destination
            ):
                logger.debug(f"Skipping {entry.path}: declined")
                result.skipped += 1
                return

            target_dir.mkdir(parents=True, exist_ok=True)
            shutil.move(str(entry.path), str(destination))

        except OSError as e:
            logger.error(f"Error moving {entry.path}: {e}")
            result.failed += 1
            result.errors.append(f"{entry.path}: {e}")
            return

        result.operations.append(
            MoveOperation(original=entry.path, moved_to=destination)
        )
        result.moved += 1
        logger.info(f"Moved {entry.path} → {destination}")

    def undo(self) -> UndoResult:
        """
        Undo the most recent organize run in the target directory.

        Files are moved back in recorded order. If something now occupies an
        original location the file is restored next to it under a suffixed
        name. Individual failures are counted, never raised.

        Returns:
            Undo result with statistics
        """
        result = UndoResult()

        log = read_log(self.target_directory)
        if log is None:
            result.nothing_to_undo = True
            result.message = "No operation log found. Nothing to undo."
            logger.info(result.message)
            return result

        if len(log) == 0:
            result.nothing_to_undo = True
            result.message = "No operations to undo."
            logger.info(result.message)
            return result

        batch = log.pop_batch()
        result.batch_timestamp = batch.timestamp
        logger.info(
            f"Undoing {len(batch.operations)} operations from "
            f"{batch.timestamp.isoformat()}"
        )

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            disable=not self.show_progress,
        ) as progress:
            task = progress.add_task("Undoing...", total=len(batch.operations))

            for operation in batch.operations:
                try:
                    self._restore(operation)
                    result.restored += 1
                except OSError as e:
                    logger.error(f"Error restoring {operation.moved_to}: {e}")
                    result.errors += 1
                    result.error_messages.append(f"{operation.moved_to}: {e}")

                progress.advance(task)

        replace_log(self.target_directory, log)

        remove_empty_category_folders(
            self.target_directory, self.strategy.category_folders
        )
        for operation in batch.operations:
            remove_empty_parents(operation.moved_to, self.target_directory)

        logger.info(f"Undo complete: restored={result.restored} errors={result.errors}")
        return result

    def _restore(self, operation: MoveOperation) -> Path:
        """
        Move one file back to where it came from.

        Raises:
            OSError: If the moved file is gone or the move fails
        """
        if not operation.moved_to.exists():
            raise FileNotFoundError(
                f"Moved file no longer exists: {operation.moved_to}"
            )

        restore_path = get_unique_path(operation.original)
        if restore_path != operation.original:
            logger.warning(
                f"{operation.original} is occupied, restoring to {restore_path}"
            )

        # the original folder may have been pruned after a recursive run
        restore_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(operation.moved_to), str(restore_path))
        logger.info(f"Moved back {operation.moved_to} → {restore_path}")
        return restore_path


def _build_strategy(
    config_path: Optional[Union[str, Path]], by_date: bool
) -> OrganizationStrategy:
    return OrganizationStrategy(
        mode=OrganizationMode.DATE if by_date else OrganizationMode.CATEGORY,
        categories=load_categories(config_path),
    )


def organize_directory(
    target_directory: Union[str, Path],
    config_path: Optional[Union[str, Path]] = None,
    by_date: bool = False,
    recursive: bool = False,
    ignore: Union[str, Sequence[str], None] = None,
    dry_run: bool = False,
    interactive: bool = False,
    confirm: Optional[ConfirmCallback] = None,
    show_progress: bool = False,
) -> OrganizationResult:
    """
    Organize a directory in one call.

    Args:
        target_directory: Directory to organize
        config_path: Optional custom categories JSON file
        by_date: Place files in year/month folders instead of categories
        recursive: Also organize files in subdirectories
        ignore: Comma-separated string or list of ignore patterns
        dry_run: Report moves without making them
        interactive: Ask confirm before each move
        confirm: Decision callback for interactive mode
        show_progress: Render a progress bar

    Returns:
        Organization result

    Raises:
        ValueError: If both dry_run and interactive are set
    """
    if dry_run and interactive:
        raise ValueError("dry_run and interactive cannot be combined")

    target = validate_target_directory(target_directory)

    if isinstance(ignore, str) or ignore is None:
        ignore_patterns = parse_ignore_patterns(ignore)
    else:
        ignore_patterns = list(ignore)

    if dry_run:
        mode = RunMode.DRY_RUN
    elif interactive:
        mode = RunMode.INTERACTIVE
    else:
        mode = RunMode.MOVE

    organizer = FileOrganizer(
        target_directory=target,
        strategy=_build_strategy(config_path, by_date),
        ignore_patterns=ignore_patterns,
        recursive=recursive,
        mode=mode,
        confirm=confirm,
        show_progress=show_progress,
    )
    return organizer.organize()


def undo_organize(
    target_directory: Union[str, Path],
    config_path: Optional[Union[str, Path]] = None,
    show_progress: bool = False,
) -> UndoResult:
    """
    Undo the last organize run in a directory.

    Args:
        target_directory: Previously organized directory
        config_path: Categories config used for the run, so that its
            category folders are swept when emptied
        show_progress: Render a progress bar

    Returns:
        Undo result
    """
    organizer = FileOrganizer(
        target_directory=target_directory,
        strategy=_build_strategy(config_path, by_date=False),
        show_progress=show_progress,
    )
    return organizer.undo()
