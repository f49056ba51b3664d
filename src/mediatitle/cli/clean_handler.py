"""Clean command handler for mediatitle CLI.

Runs the extraction pipeline on each name and renders the structured results
as a rich table or as JSON records.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mediatitle.cli.common.cleaner_factory import create_name_cleaner
from mediatitle.cli.common.context import get_cli_context
from mediatitle.cli.json_formatter import format_json_output, write_json_output
from mediatitle.core.parser import ExtractionResult
from mediatitle.shared.constants import CLICommands, CLIDefaults, CLIMessages, TableColumns

logger = logging.getLogger(__name__)


def collect_clean_data(names: Sequence[str]) -> list[dict[str, object]]:
    """Clean every name and return JSON-ready records.

    Args:
        names: Filenames, paths or URIs.

    Returns:
        One record per name: the input ``filename`` plus the result fields.
    """
    cleaner = create_name_cleaner()
    return [{"filename": name, **cleaner.clean(name).to_dict()} for name in names]


def build_results_table(names: Sequence[str], results: Sequence[ExtractionResult]) -> Table:
    """Build a rich table with one row per cleaned name."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column(TableColumns.FILENAME, style="dim", overflow="fold")
    table.add_column(TableColumns.TITLE, style="cyan")
    table.add_column(TableColumns.SEASON, justify="right")
    table.add_column(TableColumns.EPISODE, justify="right")
    table.add_column(TableColumns.YEAR, justify="right")
    table.add_column(TableColumns.ANIME, justify="center")

    for name, result in zip(names, results):
        table.add_row(
            escape(name),
            escape(result.title),
            str(result.season),
            str(result.episode),
            str(result.year) if result.has_year() else "-",
            "yes" if result.is_anime else "no",
        )
    return table


def handle_clean_command(names: Sequence[str], console: Console | None = None) -> int:
    """Handle the clean command.

    Args:
        names: Filenames, paths or URIs to clean
        console: Console for table output (defaults to stdout)

    Returns:
        Exit code (0 for success)
    """
    logger.info(CLIMessages.Info.COMMAND_STARTED.format(command=CLICommands.CLEAN))
    context = get_cli_context()

    if context.is_json_output_enabled():
        data = collect_clean_data(names)
        write_json_output(format_json_output(success=True, command=CLICommands.CLEAN, data={"results": data}))
    else:
        cleaner = create_name_cleaner()
        results = [cleaner.clean(name) for name in names]
        (console or Console()).print(build_results_table(names, results))

    logger.info(CLIMessages.Info.COMMAND_COMPLETED.format(command=CLICommands.CLEAN, count=len(names)))
    return CLIDefaults.EXIT_SUCCESS
