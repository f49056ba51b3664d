"""
Reusable Typer Options Module

This module provides reusable Typer options shared by the main callback,
keeping flag names and help text in one place. Use them as Annotated
metadata, e.g. ``verbose: Annotated[int, verbose_option] = 0``.
"""

from __future__ import annotations

import typer

from mediatitle.shared.constants import CLIDefaults, CLIHelp, CLIOptions


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=CLIDefaults.VERSION))
        raise typer.Exit


# Verbose option - count-based for multiple -v flags
verbose_option = typer.Option(
    CLIOptions.VERBOSE,
    CLIOptions.VERBOSE_SHORT,
    count=True,
    help="Enable verbose output (-v: DEBUG logging, -vv: also log every parser decision).",
)

# Log level option - enum-based with case-insensitive choices
log_level_option = typer.Option(
    CLIOptions.LOG_LEVEL,
    case_sensitive=False,
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: WARNING.",
)

# JSON output option - flag-based
json_output_option = typer.Option(
    CLIOptions.JSON,
    help="Enable machine-readable JSON output instead of human-readable format.",
)

# Configuration file option
config_option = typer.Option(
    CLIOptions.CONFIG,
    CLIOptions.CONFIG_SHORT,
    help=CLIHelp.CONFIG_HELP,
    dir_okay=False,
)

# Version option - for main app only
version_option = typer.Option(
    CLIOptions.VERSION,
    CLIOptions.VERSION_SHORT,
    help=CLIHelp.VERSION_HELP,
    is_eager=True,
    callback=version_callback,
)
