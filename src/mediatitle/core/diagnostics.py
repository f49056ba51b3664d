"""Pluggable diagnostic sinks for the extraction pipeline.

The parser reports each notable decision (pattern matched, year
disambiguation outcome, normalization step before/after) to a sink. Sinks
observe only: they never change what the parser returns.
"""

from __future__ import annotations

import logging
from typing import Protocol

from mediatitle.shared.constants import Logging


class DiagnosticSink(Protocol):
    """Protocol for objects that receive parser decision messages."""

    def log(self, component_tag: str, message: str) -> None:
        """Record a message emitted by the component named by component_tag."""
        ...  # pylint: disable=unnecessary-ellipsis


class NullDiagnosticSink:
    """Sink that discards every message."""

    def log(self, component_tag: str, message: str) -> None:
        """Discard the message."""


class LoggingDiagnosticSink:
    """Sink that forwards messages to the standard logging module.

    Each component gets its own child logger under ``mediatitle.diagnostics``
    so noisy stages can be silenced individually.

    Examples:
        >>> sink = LoggingDiagnosticSink()
        >>> sink.log("PatternCascade", "Matched S/E pattern")
    """

    def __init__(self, level: int = logging.DEBUG, base_logger: str = Logging.DIAGNOSTICS_LOGGER) -> None:
        """Initialize the sink.

        Args:
            level: Level used for every forwarded message.
            base_logger: Parent logger name for component loggers.
        """
        self.level = level
        self.base_logger = base_logger

    def log(self, component_tag: str, message: str) -> None:
        """Forward the message to the component's logger."""
        logging.getLogger(f"{self.base_logger}.{component_tag}").log(self.level, "%s", message)


NULL_SINK = NullDiagnosticSink()


def resolve_sink(sink: DiagnosticSink | None) -> DiagnosticSink:
    """Return the given sink, or the shared no-op sink when None."""
    return sink if sink is not None else NULL_SINK
