"""Batch command handler for mediatitle CLI.

Reads a newline-separated list of names from a file and runs either the
clean or the display-title pipeline over every non-blank line.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from mediatitle.cli.clean_handler import build_results_table, collect_clean_data
from mediatitle.cli.common.cleaner_factory import create_name_cleaner
from mediatitle.cli.common.context import get_cli_context
from mediatitle.cli.json_formatter import format_json_output, write_json_output
from mediatitle.cli.title_handler import collect_title_data
from mediatitle.shared.constants import CLICommands, CLIDefaults, CLIMessages, Logging
from mediatitle.shared.errors import create_file_read_error

logger = logging.getLogger(__name__)


def read_name_list(file_path: Path) -> list[str]:
    """Read non-blank, stripped lines from file_path.

    Raises:
        InfrastructureError: FILE_READ_ERROR if the file cannot be read.
    """
    try:
        text = file_path.read_text(encoding=Logging.DEFAULT_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise create_file_read_error(
            CLIMessages.Error.BATCH_READ_FAILED.format(path=file_path),
            file_path,
            operation="read_name_list",
            original_error=e,
        ) from e
    return [line.strip() for line in text.splitlines() if line.strip()]


def handle_batch_command(file_path: Path, *, display: bool = False, console: Console | None = None) -> int:
    """Handle the batch command.

    Args:
        file_path: Text file with one name per line
        display: Print display titles instead of structured results
        console: Console for human-readable output

    Returns:
        Exit code (0 for success)
    """
    logger.info(CLIMessages.Info.COMMAND_STARTED.format(command=CLICommands.BATCH))
    names = read_name_list(file_path)
    warnings = [] if names else [CLIMessages.Warning.EMPTY_BATCH.format(path=file_path)]
    if warnings:
        logger.warning(warnings[0])

    if get_cli_context().is_json_output_enabled():
        data = {"titles": collect_title_data(names)} if display else {"results": collect_clean_data(names)}
        write_json_output(
            format_json_output(success=True, command=CLICommands.BATCH, data=data, warnings=warnings),
        )
    else:
        console = console or Console()
        if warnings:
            Console(stderr=True).print(f"[yellow]{escape(warnings[0])}[/yellow]", highlight=False)
        elif display:
            for record in collect_title_data(names):
                console.print(record["title"], markup=False, highlight=False)
        else:
            cleaner = create_name_cleaner()
            console.print(build_results_table(names, [cleaner.clean(name) for name in names]))

    logger.info(CLIMessages.Info.COMMAND_COMPLETED.format(command=CLICommands.BATCH, count=len(names)))
    return CLIDefaults.EXIT_SUCCESS
