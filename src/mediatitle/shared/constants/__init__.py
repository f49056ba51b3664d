"""
mediatitle Constants Module

This module provides centralized constants for the mediatitle package.
All magic values, compiled patterns and configuration constants are defined
here to ensure consistency across the codebase.
"""

from .cli import CLICommands, CLIDefaults, CLIHelp, CLIMessages, CLIOptions, TableColumns
from .core import DiagnosticTags, DisplayFormat, ParsingDefaults, YearRange
from .system import Logging

__all__ = [
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CLIOptions",
    "DiagnosticTags",
    "DisplayFormat",
    "Logging",
    "ParsingDefaults",
    "TableColumns",
    "YearRange",
]
