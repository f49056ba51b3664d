"""
mediatitle Typer CLI Application

This is the main Typer-based CLI application for mediatitle.
It exposes the extraction pipelines as the ``clean``, ``title`` and
``batch`` commands and wires configuration and logging for them.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from mediatitle.cli.batch_handler import handle_batch_command
from mediatitle.cli.clean_handler import handle_clean_command
from mediatitle.cli.common.context import (
    DIAGNOSTICS_VERBOSITY,
    CliContext,
    LogLevel,
    get_cli_context,
    set_cli_context,
)
from mediatitle.cli.common.error_handler import handle_cli_error
from mediatitle.cli.common.options import (
    config_option,
    json_output_option,
    log_level_option,
    verbose_option,
    version_callback,
    version_option,
)
from mediatitle.cli.title_handler import handle_title_command
from mediatitle.config import load_settings
from mediatitle.core.logging import setup_logging
from mediatitle.shared.constants import (
    CLICommands,
    CLIDefaults,
    CLIHelp,
    CLIOptions,
)


def main_callback(
    verbose: int,
    log_level: LogLevel,
    json_output: bool,
    config: Path | None = None,
    version: bool = False,
) -> None:
    """
    Main callback function for processing common options.

    This function is called before any command is executed. It loads the
    settings, configures logging and sets up the global CLI context with
    the parsed options.

    Args:
        verbose: Verbosity level (count-based)
        log_level: Logging level (enum-based)
        json_output: Whether to output in JSON format
        config: Optional TOML configuration file
        version: Whether to show version information
    """
    # Handle version option first
    if version:
        version_callback(value=True)

    settings = load_settings(config)

    context = CliContext(
        verbose=verbose,
        log_level=log_level,
        json_output=json_output,
        diagnostics=settings.diagnostics.enabled or verbose >= DIAGNOSTICS_VERBOSITY,
    )
    setup_logging(settings.logging, context.get_effective_log_level())
    set_cli_context(context)


# Create the main Typer app with callback
app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[int, verbose_option] = 0,
    log_level: Annotated[LogLevel, log_level_option] = LogLevel.WARNING,
    json_output: Annotated[bool, json_output_option] = False,
    config: Annotated[Path | None, config_option] = None,
    version: Annotated[bool, version_option] = False,
) -> None:
    """Main CLI callback with error handling."""
    try:
        main_callback(verbose, log_level, json_output, config, version)
    except typer.Exit:
        raise
    except Exception as e:
        exit_code = handle_cli_error(e, "main-callback", json_output=json_output)
        raise typer.Exit(exit_code) from e


def _run(command: str, handler: Callable[..., int], *args: object, **kwargs: object) -> None:
    """Run a command handler, mapping errors and non-zero exit codes to typer.Exit."""
    try:
        exit_code = handler(*args, **kwargs)
    except Exception as e:
        exit_code = handle_cli_error(e, command, json_output=get_cli_context().is_json_output_enabled())
    if exit_code != CLIDefaults.EXIT_SUCCESS:
        raise typer.Exit(exit_code)


@app.command(CLICommands.CLEAN)
def clean_command(
    names: list[str] = typer.Argument(..., help=CLIHelp.CLEAN_NAMES_HELP),
) -> None:
    """
    Extract title, season, episode and year from filenames.

    Examples:
        # Clean a single release name
        mediatitle clean "Show.Name.S01E02.1080p.x264-GROUP.mkv"

        # Machine-readable output
        mediatitle --json clean "Movie.Title.2023.1080p.BluRay.mkv"
    """
    _run(CLICommands.CLEAN, handle_clean_command, names)


@app.command(CLICommands.TITLE)
def title_command(
    names: list[str] = typer.Argument(..., help=CLIHelp.TITLE_NAMES_HELP),
) -> None:
    """
    Print human-facing display titles for filenames.

    Examples:
        mediatitle title "Sopranos.S01E01.1080p.mkv" "The.Matrix.1999.1080p.BluRay.mkv"
    """
    _run(CLICommands.TITLE, handle_title_command, names)


@app.command(CLICommands.BATCH)
def batch_command(
    file: Path = typer.Argument(
        ...,
        help=CLIHelp.BATCH_FILE_HELP,
        dir_okay=False,
    ),
    display: bool = typer.Option(
        False,
        CLIOptions.DISPLAY,
        CLIOptions.DISPLAY_SHORT,
        help=CLIHelp.BATCH_DISPLAY_HELP,
    ),
) -> None:
    """
    Process a newline-separated list of filenames from a file.

    Examples:
        mediatitle batch downloads.txt
        mediatitle --json batch downloads.txt --display
    """
    _run(CLICommands.BATCH, handle_batch_command, file, display=display)


if __name__ == "__main__":
    app()
