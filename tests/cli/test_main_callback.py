"""
Test main callback function.

This test ensures that the main callback function correctly loads settings,
configures logging and sets up the CLI context.
"""

from __future__ import annotations

import logging

import pytest
import typer

from mediatitle.cli.common.context import LogLevel, get_cli_context
from mediatitle.cli.typer_app import main_callback
from mediatitle.shared.errors import ApplicationError, ErrorCode


def test_main_callback_sets_context() -> None:
    """Test that main_callback sets the context from the options."""
    main_callback(verbose=0, log_level=LogLevel.ERROR, json_output=True)

    context = get_cli_context()
    assert context.verbose == 0
    assert context.log_level == LogLevel.ERROR
    assert context.json_output is True
    assert context.diagnostics is False
    assert logging.getLogger().level == logging.ERROR


def test_verbose_forces_debug() -> None:
    """Test that one -v switches logging to DEBUG without diagnostics."""
    main_callback(verbose=1, log_level=LogLevel.WARNING, json_output=False)

    assert get_cli_context().diagnostics is False
    assert logging.getLogger().level == logging.DEBUG


def test_double_verbose_enables_diagnostics() -> None:
    """Test that -vv turns on parser diagnostics."""
    main_callback(verbose=2, log_level=LogLevel.WARNING, json_output=False)

    assert get_cli_context().diagnostics is True


def test_diagnostics_from_config(tmp_path) -> None:
    """Test that the config file can enable diagnostics."""
    config_file = tmp_path / "diag.toml"
    config_file.write_text("[diagnostics]\nenabled = true\n", encoding="utf-8")

    main_callback(verbose=0, log_level=LogLevel.WARNING, json_output=False, config=config_file)

    assert get_cli_context().diagnostics is True


def test_missing_config_raises(tmp_path) -> None:
    """Test that a missing config file is reported as CONFIG_MISSING."""
    with pytest.raises(ApplicationError) as exc_info:
        main_callback(verbose=0, log_level=LogLevel.WARNING, json_output=False, config=tmp_path / "none.toml")

    assert exc_info.value.code == ErrorCode.CONFIG_MISSING


def test_version_exits() -> None:
    """Test that the version option exits."""
    with pytest.raises(typer.Exit):
        main_callback(verbose=0, log_level=LogLevel.WARNING, json_output=False, version=True)
