"""mediatitle Settings Configuration Model.

Settings class consolidating the logging and diagnostics configuration
domains. Values come from (highest priority first) explicit keyword
arguments or a TOML file, ``MEDIATITLE_*`` environment variables, a ``.env``
file, and the field defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediatitle.shared.constants import Logging

logger = logging.getLogger(__name__)


class LoggingSettings(BaseModel):
    """Logging configuration.

    This class manages logging behavior including level, format,
    file output, and console output settings.
    """

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    format_string: str = Field(
        default=Logging.DEFAULT_FORMAT,
        description="Log format string",
        alias="format",
    )
    file: str | None = Field(default=None, description="Log file path (no file logging when unset)")
    max_bytes: int = Field(
        default=Logging.MAX_BYTES,
        gt=0,
        description="Maximum log file size in bytes",  # 10MB
    )
    backup_count: int = Field(
        default=Logging.BACKUP_COUNT,
        ge=0,
        description="Number of backup log files to keep",
    )
    console_output: bool = Field(default=True, description="Enable console logging")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown logging level: {value}"
            raise ValueError(msg)
        return level


class DiagnosticsSettings(BaseModel):
    """Parser diagnostics configuration.

    When enabled, every parser decision is forwarded to the logging module
    under the ``mediatitle.diagnostics`` logger at DEBUG level.
    """

    enabled: bool = Field(default=False, description="Forward parser decisions to logging")


class Settings(BaseSettings):
    """Top-level settings for mediatitle."""

    model_config = SettingsConfigDict(
        env_prefix="MEDIATITLE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    diagnostics: DiagnosticsSettings = Field(default_factory=DiagnosticsSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file with environment variable overrides.

        Raises:
            FileNotFoundError: If file_path does not exist.
            toml.TomlDecodeError: If the file is not valid TOML.
        """
        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        logger.debug("Loaded configuration sections %s from %s", sorted(raw_config), file_path)
        return cls(**raw_config)
