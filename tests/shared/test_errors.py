"""
Tests for the mediatitle error handling system.

This module contains unit tests for the error hierarchy defined in
mediatitle.shared.errors.
"""

from enum import Enum
from pathlib import Path

import pytest

from mediatitle.shared.errors import (
    ApplicationError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    MediaTitleError,
    create_config_error,
    create_file_read_error,
)


class TestErrorContext:
    """Test cases for ErrorContext frozen dataclass."""

    def test_empty_context(self):
        """Test creating an empty ErrorContext."""
        context = ErrorContext()

        assert context.file_path is None
        assert context.operation is None
        assert context.additional_data is None
        assert context.safe_dict() == {"additional_data": {}}

    def test_additional_data_is_coerced(self):
        """Test Path and Enum values become primitives."""

        class Color(Enum):
            RED = "red"

        context = ErrorContext(additional_data={"path": Path("a/b"), "color": Color.RED, "count": 3})

        assert context.additional_data == {"path": str(Path("a/b")), "color": "red", "count": 3}

    def test_rejects_complex_values(self):
        """Test non-primitive values raise TypeError."""
        with pytest.raises(TypeError):
            ErrorContext(additional_data={"items": [1, 2]})

        with pytest.raises(TypeError):
            ErrorContext(additional_data=["not", "a", "dict"])  # type: ignore[arg-type]


class TestMediaTitleError:
    """Test cases for the base error."""

    def test_string_and_dict(self):
        """Test the string form and dictionary export."""
        original = OSError("disk")
        error = MediaTitleError(
            ErrorCode.FILE_READ_ERROR,
            "cannot read",
            ErrorContext(file_path="list.txt", operation="read"),
            original,
        )

        assert str(error) == "FILE_READ_ERROR: cannot read"
        assert error.to_dict() == {
            "code": "FILE_READ_ERROR",
            "message": "cannot read",
            "context": {"file_path": "list.txt", "operation": "read", "additional_data": {}},
            "original_error": "disk",
        }

    def test_default_context(self):
        """Test a missing context is replaced by an empty one."""
        error = ApplicationError(ErrorCode.CONFIG_INVALID, "bad")

        assert error.context == ErrorContext()
        assert error.to_dict()["original_error"] is None


def test_create_config_error():
    """Test configuration error codes."""
    missing = create_config_error("missing", "cfg.toml", missing=True)
    invalid = create_config_error("invalid")

    assert isinstance(missing, ApplicationError)
    assert missing.code == ErrorCode.CONFIG_MISSING
    assert missing.context.file_path == "cfg.toml"
    assert missing.context.operation == "load_settings"
    assert invalid.code == ErrorCode.CONFIG_INVALID
    assert invalid.context.file_path is None


def test_create_file_read_error():
    """Test file read errors carry the path and cause."""
    cause = FileNotFoundError("names.txt")
    error = create_file_read_error("cannot read", Path("names.txt"), operation="read_name_list", original_error=cause)

    assert isinstance(error, InfrastructureError)
    assert isinstance(error, MediaTitleError)
    assert error.code == ErrorCode.FILE_READ_ERROR
    assert error.context.file_path == "names.txt"
    assert error.original_error is cause
