"""Tests for diagnostic sinks."""

from __future__ import annotations

import logging

from mediatitle.core.diagnostics import (
    NULL_SINK,
    DiagnosticSink,
    LoggingDiagnosticSink,
    NullDiagnosticSink,
    resolve_sink,
)


def test_null_sink_discards():
    """Test the null sink accepts messages and does nothing."""
    assert NullDiagnosticSink().log("Tag", "message") is None


def test_resolve_sink(recording_sink):
    """Test None resolves to the shared null sink."""
    assert resolve_sink(None) is NULL_SINK
    assert resolve_sink(recording_sink) is recording_sink


def test_recording_sink_satisfies_protocol(recording_sink):
    """Test any object with log(tag, message) is a sink."""
    sink: DiagnosticSink = recording_sink
    sink.log("Tag", "message")

    assert recording_sink.records == [("Tag", "message")]


class TestLoggingDiagnosticSink:
    """Forwarding to the logging module."""

    def test_logs_to_component_logger(self, caplog):
        """Test each tag gets a child logger under mediatitle.diagnostics."""
        caplog.set_level(logging.DEBUG, logger="mediatitle.diagnostics")

        LoggingDiagnosticSink().log("PatternCascade", "Matched S/E pattern")

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == "mediatitle.diagnostics.PatternCascade"
        assert record.levelno == logging.DEBUG
        assert record.getMessage() == "Matched S/E pattern"

    def test_custom_level_and_base(self, caplog):
        """Test level and parent logger are configurable."""
        caplog.set_level(logging.INFO, logger="custom")

        LoggingDiagnosticSink(level=logging.INFO, base_logger="custom").log("Tag", "100% done")

        assert caplog.records[0].name == "custom.Tag"
        assert caplog.records[0].getMessage() == "100% done"

    def test_filtered_by_level(self, caplog):
        """Test DEBUG messages are dropped when the logger is at INFO."""
        caplog.set_level(logging.INFO, logger="mediatitle.diagnostics")

        LoggingDiagnosticSink().log("Tag", "hidden")

        assert caplog.records == []
