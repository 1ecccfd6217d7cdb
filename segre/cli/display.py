"""
Console output and the output options shared by segre commands.
"""

from functools import wraps
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..shared import setup_logging

MAX_LISTED_FAILURES = 10


def output_options(f: Callable) -> Callable:
    """Add -v/--verbose and -q/--quiet, and configure logging from them."""

    @wraps(f)
    def wrapper(*args, verbose: bool, quiet: bool, **kwargs):
        setup_logging(verbose=verbose, quiet=quiet)
        return f(*args, verbose=verbose, quiet=quiet, **kwargs)

    wrapper = click.option(
        "-q",
        "--quiet",
        is_flag=True,
        help="Only show prompts, warnings and errors",
    )(wrapper)
    wrapper = click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="Log every file as it is handled",
    )(wrapper)
    return wrapper


class Display:
    """Rich console output; quiet mode keeps warnings and errors only."""

    def __init__(self, quiet: bool = False, console: Optional[Console] = None):
        self.console = console or Console()
        self.quiet = quiet

    def _emit(self, message: str, style: str = "", always: bool = False) -> None:
        if self.quiet and not always:
            return
        self.console.print(f"[{style}]{message}[/{style}]" if style else message)

    def header(self, title: str) -> None:
        self._emit(f"\n{title}\n", "bold cyan")

    def info(self, message: str) -> None:
        self._emit(message)

    def success(self, message: str) -> None:
        self._emit(message, "green")

    def warning(self, message: str) -> None:
        self._emit(message, "yellow", always=True)

    def error(self, message: str) -> None:
        self._emit(message, "red", always=True)

    def counts(self, title: str, counts: Dict[str, int]) -> None:
        """Print a two-column table of file counts."""
        if self.quiet:
            return

        table = Table(title=title)
        table.add_column("Files", style="cyan")
        table.add_column("Count", style="green", justify="right")
        for label, count in counts.items():
            table.add_row(label, f"{count:,}")

        self.console.print(table)

    def planned_moves(self, planned: Iterable[Tuple[Path, Path]], root: Path) -> None:
        """List dry-run moves relative to the organized directory."""
        for source, destination in planned:
            self.info(
                f"  [blue]\\[DRY RUN] Would move: "
                f"{escape(str(source.relative_to(root)))} → "
                f"{escape(str(destination.relative_to(root)))}[/blue]"
            )

    def failures(self, messages: List[str]) -> None:
        """Print per-file failure messages, truncated after a few."""
        for message in messages[:MAX_LISTED_FAILURES]:
            self.error(f"  • {escape(message)}")
        hidden = len(messages) - MAX_LISTED_FAILURES
        if hidden > 0:
            self.error(f"  ... and {hidden} more")
