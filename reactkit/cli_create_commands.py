"""Project creation CLI commands - create, features."""
import dataclasses
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from reactkit.cli_support import (
    build_selection,
    handle_cli_error,
    print_banner,
    print_warning,
    setup_file_logging,
)
from reactkit.core.config import get_config
from reactkit.core.errors import ReactkitError
from reactkit.core.logger import set_verbose
from reactkit.features import FEATURES
from reactkit.scaffold.composer import DEFAULT_PROJECT_NAME, ProjectComposer

# Module-level console instance (will be set by register function)
console: Console = Console()


def create(
    name: str = typer.Argument(DEFAULT_PROJECT_NAME, help="Project name"),
    typescript: bool = typer.Option(False, "--typescript", "-t", help=FEATURES["typescript"].description),
    sass: bool = typer.Option(False, "--sass", "-s", help=FEATURES["sass"].description),
    classnames: bool = typer.Option(False, "--classnames", "-c", help=FEATURES["classnames"].description),
    linting: bool = typer.Option(False, "--linting", "-l", help=FEATURES["linting"].description),
    feature: Optional[List[str]] = typer.Option(
        None, "--feature", "-f", help="Add a feature by name (repeatable, order is kept)"
    ),
    directory: Path = typer.Option(
        Path("."), "--directory", "-d", help="Directory to create the project in"
    ),
    template_dir: Optional[Path] = typer.Option(
        None, "--template-dir", help="Use templates from this directory"
    ),
    no_test_config: bool = typer.Option(
        False, "--no-test-config", help="Do not generate jest.config.js"
    ),
    force: bool = typer.Option(False, "--force", help="Compose into an existing non-empty directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Create a new React project from the default template plus features.

    Examples:
        reactkit create                       # Plain JavaScript project
        reactkit create shop -t -s            # TypeScript + Sass
        reactkit create shop -f sass -f typescript
    """
    set_verbose(verbose)
    if log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        config = get_config()
        if template_dir is not None:
            config = dataclasses.replace(config, template_dir=template_dir)
        if no_test_config:
            config = dataclasses.replace(config, test_runner_config=False)

        selection = build_selection(
            {
                "typescript": typescript,
                "sass": sass,
                "classnames": classnames,
                "linting": linting,
            },
            feature,
        )
        result = ProjectComposer(config).compose(
            name,
            selection,
            parent_dir=directory.expanduser().resolve(),
            force=force,
        )
    except (ReactkitError, OSError) as e:
        handle_cli_error(e, console, verbose)

    for warning in result.warnings:
        print_warning(console, warning)
    print_banner(console, name)


def features():
    """List the features that can be added to a project."""
    table = Table(title="Available features")
    table.add_column("Feature", style="bold")
    table.add_column("Flag", style="cyan")
    table.add_column("Description")

    for feature in FEATURES.values():
        table.add_row(feature.name, f"{feature.flag}, -{feature.alias}", feature.description)

    console.print(table)


def register_create_commands(app: typer.Typer, shared_console: Console):
    """Register create and features commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(create)
    app.command()(features)
