"""Fixtures for CLI tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolated_cli(restore_root_logger, monkeypatch, tmp_path):
    """Run CLI tests in an empty directory and restore logging afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
