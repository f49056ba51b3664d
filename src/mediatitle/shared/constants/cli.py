"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration, default values, and user interaction settings.
"""

from typing import Literal


class CLIOptions:
    """CLI option names and flags."""

    # Common options
    VERBOSE = "--verbose"
    VERBOSE_SHORT = "-v"
    LOG_LEVEL = "--log-level"
    JSON = "--json"
    CONFIG = "--config"
    CONFIG_SHORT = "-c"
    VERSION = "--version"
    VERSION_SHORT = "-V"

    # Batch options
    DISPLAY = "--display"
    DISPLAY_SHORT = "-d"


class CLICommands:
    """CLI command names."""

    CLEAN = "clean"
    TITLE = "title"
    BATCH = "batch"


class CLIHelp:
    """CLI help text and descriptions."""

    # Version
    VERSION_HELP = "Print version information and exit."
    VERSION_TEXT = "mediatitle CLI v{version}"

    # App info
    APP_NAME = "mediatitle"
    APP_DESCRIPTION = "mediatitle - Media filename metadata extraction"
    APP_STYLE: Literal["rich"] = "rich"

    # Commands
    CLEAN_NAMES_HELP = "Filenames, paths or URIs to clean."
    TITLE_NAMES_HELP = "Filenames, paths or URIs to format."
    BATCH_FILE_HELP = "Text file with one filename per line."
    BATCH_DISPLAY_HELP = "Print display titles instead of structured results."
    CONFIG_HELP = "Path to a TOML configuration file."


class CLIMessages:
    """CLI message templates."""

    class Error:
        """Error message templates."""

        APPLICATION_ERROR = "Application error: "
        INFRASTRUCTURE_ERROR = "Infrastructure error: "
        UNEXPECTED_ERROR = "Unexpected error: "
        BATCH_READ_FAILED = "Failed to read filename list: {path}"

    class Info:
        """Info message templates."""

        COMMAND_STARTED = "Command started: {command}"
        COMMAND_COMPLETED = "Command completed: {command} ({count} names)"

    class Warning:
        """Warning message templates."""

        EMPTY_BATCH = "No filenames found in {path}"


class CLIDefaults:
    """CLI default values."""

    VERSION = "0.1.0"

    # Exit codes
    EXIT_SUCCESS = 0
    EXIT_ERROR = 1


class TableColumns:
    """Column headers for the clean results table."""

    FILENAME = "Filename"
    TITLE = "Title"
    SEASON = "Season"
    EPISODE = "Episode"
    YEAR = "Year"
    ANIME = "Anime"
