"""
CLI Error Handling Utilities

This module provides consistent error handling across CLI commands:
logging, user-facing output (rich or JSON) and exit code selection.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from mediatitle.cli.json_formatter import format_json_output, write_json_output
from mediatitle.shared.constants import CLIDefaults, CLIMessages
from mediatitle.shared.errors import ApplicationError, InfrastructureError, MediaTitleError

logger = logging.getLogger(__name__)


def handle_cli_error(
    error: Exception,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Handle CLI errors with consistent formatting and logging.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    message = _user_message(error)

    if isinstance(error, MediaTitleError):
        logger.error("%s failed: %s", command, message, extra={"error": error.to_dict()})
    else:
        logger.exception("Unexpected error in %s", command)

    if json_output:
        write_json_output(format_json_output(success=False, command=command, errors=[message]))
    else:
        Console(stderr=True).print(f"[red]{escape(message)}[/red]", highlight=False)

    return CLIDefaults.EXIT_ERROR


def _user_message(error: Exception) -> str:
    if isinstance(error, ApplicationError):
        return f"{CLIMessages.Error.APPLICATION_ERROR}{error.message}"
    if isinstance(error, InfrastructureError):
        return f"{CLIMessages.Error.INFRASTRUCTURE_ERROR}{error.message}"
    return f"{CLIMessages.Error.UNEXPECTED_ERROR}{error}"
