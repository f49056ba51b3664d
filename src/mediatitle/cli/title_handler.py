"""Title command handler for mediatitle CLI."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.console import Console

from mediatitle.cli.common.cleaner_factory import create_name_cleaner
from mediatitle.cli.common.context import get_cli_context
from mediatitle.cli.json_formatter import format_json_output, write_json_output
from mediatitle.shared.constants import CLICommands, CLIDefaults, CLIMessages

logger = logging.getLogger(__name__)


def collect_title_data(names: Sequence[str]) -> list[dict[str, str]]:
    """Return ``{"filename", "title"}`` records for names."""
    cleaner = create_name_cleaner()
    return [{"filename": name, "title": cleaner.extract_display_title(name)} for name in names]


def handle_title_command(names: Sequence[str], console: Console | None = None) -> int:
    """Handle the title command.

    Prints one display title per line, or a JSON envelope with records.

    Returns:
        Exit code (0 for success)
    """
    logger.info(CLIMessages.Info.COMMAND_STARTED.format(command=CLICommands.TITLE))
    data = collect_title_data(names)

    if get_cli_context().is_json_output_enabled():
        write_json_output(format_json_output(success=True, command=CLICommands.TITLE, data={"titles": data}))
    else:
        console = console or Console()
        for record in data:
            console.print(record["title"], markup=False, highlight=False)

    logger.info(CLIMessages.Info.COMMAND_COMPLETED.format(command=CLICommands.TITLE, count=len(names)))
    return CLIDefaults.EXIT_SUCCESS
