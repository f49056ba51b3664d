"""Build the NameCleaner used by CLI commands."""

from __future__ import annotations

from mediatitle.cli.common.context import get_cli_context
from mediatitle.core.diagnostics import LoggingDiagnosticSink
from mediatitle.core.parser import NameCleaner


def create_name_cleaner() -> NameCleaner:
    """Return a NameCleaner that logs parser decisions when diagnostics are on."""
    context = get_cli_context()
    if context.diagnostics:
        return NameCleaner(LoggingDiagnosticSink())
    return NameCleaner()
