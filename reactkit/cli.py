#!/usr/bin/env python3
"""reactkit CLI - scaffold React projects your way."""
from typing import Optional

import typer
from rich.console import Console

from reactkit import __version__
from reactkit.cli_create_commands import register_create_commands

app = typer.Typer(
    name="reactkit",
    help="""reactkit - scaffold React projects from composable templates

Quick start:
  reactkit create my-app            # Plain JavaScript project
  reactkit create my-app -t -s -l   # TypeScript + Sass + linting
  reactkit features                 # What can be added

More commands: reactkit --help
""",
    add_completion=False,
)

console = Console()


def _version_callback(value: bool):
    if value:
        console.print(f"reactkit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """reactkit - scaffold React projects from composable templates."""


# Attach modular subcommands
register_create_commands(app, console)

if __name__ == "__main__":
    app()
