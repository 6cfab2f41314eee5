"""Shared utilities for reactkit CLI modules."""
from __future__ import annotations

from typing import Iterable, List, Optional

import typer
from rich.console import Console

from reactkit.features import FEATURES, FeatureSelection


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from reactkit.core.logger import setup_file_logging as _setup_file_logging
    _setup_file_logging(log_file=log_file, verbose=verbose)


def build_selection(flags: dict, extra: Optional[Iterable[str]] = None) -> FeatureSelection:
    """Turn CLI input into an ordered feature selection.

    Boolean flags are applied in registry order, then ``--feature`` values in
    the order they were given. Duplicates keep their first position.

    Args:
        flags: Mapping of feature name to flag value
        extra: Feature names from repeated ``--feature`` options

    Raises:
        UnknownFeatureError: If an extra name is not registered
    """
    names: List[str] = [name for name in FEATURES if flags.get(name)]
    names.extend(extra or [])
    return FeatureSelection(names)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {e}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting."""
    console.print(f"[yellow]{prefix}[/yellow] {message}")


def print_banner(console: Console, project_name: str) -> None:
    """Print the closing instructions after a successful create."""
    print_success(console, f"Project {project_name} setup complete!")
    console.print("To get started, run the following commands:")
    console.print(f"  [cyan]cd {project_name}[/cyan]")
    console.print("  [cyan]npm install[/cyan]")
    console.print("  [cyan]npm start[/cyan]")
    console.print("🦦")
