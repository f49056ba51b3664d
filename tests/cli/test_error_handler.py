"""Tests for CLI error handling and JSON output."""

from __future__ import annotations

import orjson

from mediatitle.cli.common.error_handler import handle_cli_error
from mediatitle.cli.json_formatter import format_json_output
from mediatitle.shared.errors import create_config_error, create_file_read_error


class TestHandleCliError:
    """handle_cli_error output and exit codes."""

    def test_application_error_to_stderr(self, capsys):
        """Test configuration errors are printed to stderr."""
        error = create_config_error("Configuration file not found: [x].toml", "[x].toml", missing=True)

        exit_code = handle_cli_error(error, "main-callback")

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Application error: Configuration file not found: [x].toml" in captured.err

    def test_infrastructure_error_as_json(self, capsys):
        """Test JSON mode writes the error envelope to stdout."""
        error = create_file_read_error("Failed to read filename list: a.txt", "a.txt")

        exit_code = handle_cli_error(error, "batch", json_output=True)

        payload = orjson.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert payload["success"] is False
        assert payload["command"] == "batch"
        assert payload["errors"] == ["Infrastructure error: Failed to read filename list: a.txt"]

    def test_unexpected_error(self, capsys):
        """Test other exceptions are reported as unexpected."""
        exit_code = handle_cli_error(RuntimeError("boom"), "clean")

        assert exit_code == 1
        assert "Unexpected error: boom" in capsys.readouterr().err


class TestFormatJsonOutput:
    """The JSON envelope."""

    def test_envelope(self):
        """Test all envelope keys are present."""
        payload = orjson.loads(format_json_output(success=True, command="title", data={"titles": []}))

        assert set(payload) == {"success", "timestamp", "command", "data", "errors", "warnings"}
        assert payload["success"] is True
        assert payload["data"] == {"titles": []}
        assert payload["warnings"] == []

    def test_errors_force_failure(self):
        """Test success is False whenever errors are present."""
        payload = orjson.loads(format_json_output(success=True, command="clean", errors=["bad"]))

        assert payload["success"] is False

    def test_unserializable_data(self):
        """Test serialization failures produce an error envelope."""
        payload = orjson.loads(format_json_output(success=True, command="clean", data={"x": object()}))

        assert payload["success"] is False
        assert payload["data"] is None
        assert payload["errors"][0].startswith("JSON serialization failed")
