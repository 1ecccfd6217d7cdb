"""
Operation log for undo.

Every organize run that moves at least one file appends a batch of move
records to a JSON file in the target directory. Undo pops the most recent
batch. The file is removed once no batches remain, so an existing log file
always holds at least one batch.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

logger = logging.getLogger(__name__)

LOG_FILE_NAME = ".segre-log.json"


class MoveOperation(BaseModel):
    """A single file move that has completed on disk."""

    original: Path = Field(description="Path the file was moved from")
    moved_to: Path = Field(alias="movedTo", description="Path the file was moved to")

    model_config = ConfigDict(populate_by_name=True)


class Batch(BaseModel):
    """Moves made by one organize run."""

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the batch was recorded",
    )
    operations: List[MoveOperation] = Field(
        default_factory=list, description="Moves in the order they were made"
    )


class OperationLog(RootModel[List[Batch]]):
    """Stack of batches, most recent last."""

    root: List[Batch] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.root)

    def push_batch(self, operations: Sequence[MoveOperation]) -> Batch:
        """
        Append a new batch stamped with the current time.

        Args:
            operations: Completed moves

        Returns:
            Created batch
        """
        batch = Batch(operations=list(operations))
        self.root.append(batch)
        return batch

    def pop_batch(self) -> Batch:
        """
        Remove and return the most recent batch.

        Raises:
            IndexError: If the log is empty
        """
        return self.root.pop()


def get_log_path(target_dir: Path) -> Path:
    """Location of the operation log for a target directory."""
    return Path(target_dir) / LOG_FILE_NAME


def _load(log_path: Path) -> Optional[OperationLog]:
    try:
        with open(log_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except json.JSONDecodeError as e:
        logger.warning(f"Ignoring unreadable operation log {log_path}: {e}")
        return None

    try:
        return OperationLog.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed operation log {log_path}: {e}")
        return None


def _write(log_path: Path, log: OperationLog) -> None:
    with open(log_path, "w", encoding="utf-8") as f:
        json.dump(log.model_dump(mode="json", by_alias=True), f, indent=2)


def read_log(target_dir: Path) -> Optional[OperationLog]:
    """
    Read the operation log of a target directory.

    Args:
        target_dir: Organized directory

    Returns:
        Parsed log, or None if there is no (usable) log file
    """
    return _load(get_log_path(target_dir))


def append_batch(target_dir: Path, operations: Sequence[MoveOperation]) -> Batch:
    """
    Record a batch of completed moves.

    A missing or unreadable log is treated as empty.

    Args:
        target_dir: Organized directory
        operations: Completed moves

    Returns:
        The batch that was appended
    """
    log_path = get_log_path(target_dir)
    log = _load(log_path) or OperationLog()
    batch = log.push_batch(operations)
    _write(log_path, log)

    logger.info(
        f"Recorded {len(batch.operations)} operations in {log_path} "
        f"({len(log)} batches)"
    )
    return batch


def replace_log(target_dir: Path, log: OperationLog) -> None:
    """
    Persist an updated log, deleting the file if no batches remain.

    Args:
        target_dir: Organized directory
        log: Log to persist
    """
    log_path = get_log_path(target_dir)

    if len(log) > 0:
        _write(log_path, log)
        logger.debug(f"Saved operation log {log_path} ({len(log)} batches)")
    else:
        log_path.unlink(missing_ok=True)
        logger.debug(f"Removed empty operation log {log_path}")
