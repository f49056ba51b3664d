"""Centralized logging configuration for mediatitle.

This module sets up the application's root logger with optional file
rotation and console output based on LoggingSettings.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from mediatitle.config.settings import LoggingSettings
from mediatitle.shared.constants import Logging


def setup_logging(
    settings: LoggingSettings | None = None,
    log_level: str | None = None,
) -> None:
    """Set up the application's root logger.

    Args:
        settings: Logging configuration. If None, defaults are used.
        log_level: Overrides settings.level (e.g. from the --log-level flag).
    """
    settings = settings or LoggingSettings()
    level_name = (log_level or settings.level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name))

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt=settings.format_string,
        datefmt=Logging.DEFAULT_DATE_FORMAT,
    )

    if settings.file:
        log_path = Path(settings.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding=Logging.DEFAULT_ENCODING,
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Console logs go to stderr; stdout carries command results
    if settings.console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())
