"""
Pytest configuration and shared fixtures for mediatitle tests.

This module provides common fixtures and configuration that can be used
across all test modules in the project.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest

from mediatitle.cli.common.context import clear_cli_context

# Keep CLI runs from attaching stderr handlers to the root logger
os.environ.setdefault("MEDIATITLE_LOGGING__CONSOLE_OUTPUT", "false")


class RecordingSink:
    """Diagnostic sink that keeps every (component_tag, message) pair."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def log(self, component_tag: str, message: str) -> None:
        self.records.append((component_tag, message))

    def messages(self, component_tag: str) -> list[str]:
        """Return messages logged under component_tag, in order."""
        return [message for tag, message in self.records if tag == component_tag]


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Provide a fresh recording diagnostic sink."""
    return RecordingSink()


@pytest.fixture(autouse=True)
def reset_cli_context() -> Generator[None, None, None]:
    """Ensure each test starts and ends without a CLI context."""
    clear_cli_context()
    yield
    clear_cli_context()


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Restore root logger handlers and level after a test reconfigures them.

    Yields:
        The root logger.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
