"""
Main CLI entry point for segre.

Commands: organize, undo, categories and init-config.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core.categories import FALLBACK_CATEGORY
from ..core.config import (
    DEFAULT_CONFIG_FILE_NAME,
    SegreSettings,
    generate_sample_config,
    load_categories,
)
from ..core.errors import SegreError, validate_target_directory
from ..organization import (
    FileOrganizer,
    OrganizationMode,
    OrganizationResult,
    OrganizationStrategy,
    RunMode,
    undo_organize,
)
from ..shared import parse_ignore_patterns
from .display import Display, output_options


@click.group()
@click.version_option(__version__, prog_name="segre")
def cli() -> None:
    """
    Segre - organize files into category folders, with undo.
    """


@cli.command()
@click.argument("directory", type=click.Path())
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Path to custom categories config file (JSON)",
)
@click.option(
    "-d",
    "--dry-run",
    is_flag=True,
    help="Show what would happen without moving files",
)
@click.option(
    "-i",
    "--interactive",
    is_flag=True,
    help="Ask before moving each file",
)
@click.option(
    "-b",
    "--by-date",
    is_flag=True,
    help="Organize files by modification date (Year/Month)",
)
@click.option(
    "-r/-R",
    "--recursive/--no-recursive",
    default=None,
    help="Also organize files in subdirectories (default: SEGRE_RECURSIVE)",
)
@click.option(
    "--ignore",
    type=str,
    help="Comma-separated patterns to ignore (e.g. node_modules,.git,*.log)",
)
@output_options
def organize(
    directory: str,
    config_path: Optional[str],
    dry_run: bool,
    interactive: bool,
    by_date: bool,
    recursive: Optional[bool],
    ignore: Optional[str],
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Organize the files in DIRECTORY into category folders.

    \b
    Examples:
        # Preview first
        segre organize ~/Downloads --dry-run

        # Sort by modification date into 2024/Mar/ style folders
        segre organize ~/Downloads --by-date

        # Include subdirectories, skipping some paths
        segre organize ~/Downloads -r --ignore node_modules,.git,*.log

    Every run that moves files can be reverted with `segre undo`.
    """
    if dry_run and interactive:
        raise click.UsageError("--dry-run and --interactive cannot be combined")

    display = Display(quiet=quiet)
    display.header(f"Segre v{__version__}")

    settings = SegreSettings()
    config_path = config_path or settings.config
    ignore_patterns = parse_ignore_patterns(
        ignore if ignore is not None else settings.ignore
    )
    if recursive is None:
        recursive = settings.recursive

    if dry_run:
        mode = RunMode.DRY_RUN
    elif interactive:
        mode = RunMode.INTERACTIVE
    else:
        mode = RunMode.MOVE

    try:
        target = validate_target_directory(directory)

        def confirm(source: Path, destination: Path) -> bool:
            relative = destination.parent.relative_to(target)
            return click.confirm(f"Move {source.name} → {relative}?", default=True)

        organizer = FileOrganizer(
            target_directory=target,
            strategy=OrganizationStrategy(
                mode=OrganizationMode.DATE if by_date else OrganizationMode.CATEGORY,
                categories=load_categories(config_path),
            ),
            ignore_patterns=ignore_patterns,
            recursive=recursive,
            mode=mode,
            confirm=confirm,
            show_progress=not quiet,
        )

        entries = organizer.discover()
        display.success(f"Found {len(entries)} files to organize")
        if not entries:
            display.warning("No files to organize.")
            return

        result = organizer.organize(entries)

    except (SegreError, OSError) as e:
        display.error(f"Error: {escape(str(e))}")
        sys.exit(1)

    _display_result(display, result, target)


def _display_result(display: Display, result: OrganizationResult, target: Path) -> None:
    if result.dry_run:
        display.planned_moves(result.planned, target)
        display.counts(
            "Summary",
            {
                "Would move": len(result.planned),
                "Already organized": result.already_organized,
            },
        )
        display.warning("\nThis was a DRY RUN - no files were modified")
        return

    display.counts(
        "Summary",
        {
            "Moved": result.moved,
            "Skipped": result.skipped,
            "Failed": result.failed,
            "Already organized": result.already_organized,
        },
    )

    if result.errors:
        display.error("\nErrors:")
        display.failures(result.errors)

    if result.moved:
        display.info(f"\n[dim]Undo with: segre undo {escape(str(target))}[/dim]")


@cli.command()
@click.argument("directory", type=click.Path())
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Categories config used when organizing (for folder cleanup)",
)
@output_options
def undo(
    directory: str, config_path: Optional[str], verbose: bool, quiet: bool
) -> None:
    """
    Undo the last organize run in DIRECTORY.
    """
    display = Display(quiet=quiet)
    display.header("Segre - Undo")

    config_path = config_path or SegreSettings().config

    try:
        result = undo_organize(directory, config_path, show_progress=not quiet)
    except (SegreError, OSError) as e:
        display.error(f"Error: {escape(str(e))}")
        sys.exit(1)

    if result.nothing_to_undo:
        display.warning(result.message or "Nothing to undo.")
        return

    display.info(f"Undid operations from {result.batch_timestamp.isoformat()}")
    display.counts(
        "Undo Summary", {"Restored": result.restored, "Errors": result.errors}
    )
    display.failures(result.error_messages)


@cli.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Path to custom categories config file",
)
def categories(config_path: Optional[str]) -> None:
    """
    Show file categories and their extensions.
    """
    display = Display()

    try:
        category_map = load_categories(config_path or SegreSettings().config)
    except (SegreError, OSError) as e:
        display.error(f"Error: {escape(str(e))}")
        sys.exit(1)

    table = Table(title="File Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Extensions")

    for name, extensions in category_map.items():
        if extensions:
            table.add_row(name, ", ".join(sorted(extensions)))
        elif name == FALLBACK_CATEGORY:
            table.add_row(name, "[dim](fallback for unmatched files)[/dim]")
        else:
            table.add_row(name, "[dim](none)[/dim]")

    display.console.print(table)


@cli.command("init-config")
@click.argument(
    "path", type=click.Path(dir_okay=False), default=DEFAULT_CONFIG_FILE_NAME
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init_config(path: str, force: bool) -> None:
    """
    Generate a sample categories config file at PATH.
    """
    display = Display()

    try:
        generate_sample_config(path, overwrite=force)
    except (SegreError, OSError) as e:
        display.error(f"Error creating config: {escape(str(e))}")
        sys.exit(1)

    display.success(f"\nSample config created: {path}\n")
    display.info("[dim]Edit this file to customize your categories.[/dim]")


if __name__ == "__main__":
    cli()
