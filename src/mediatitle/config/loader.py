"""Settings loader.

Wraps Settings construction so that configuration problems surface as
ApplicationError with a stable error code instead of library exceptions.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from pydantic import ValidationError

from mediatitle.config.settings import Settings
from mediatitle.shared.errors import create_config_error

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS: tuple[Path, ...] = (
    Path("config/mediatitle.toml"),
    Path("mediatitle.toml"),
)


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML configuration file or the environment.

    Args:
        config_path: Optional path to a TOML file. If None, the default
            locations are tried, then environment variables alone.

    Returns:
        Validated Settings instance.

    Raises:
        ApplicationError: CONFIG_MISSING if config_path does not exist,
            CONFIG_INVALID if the file cannot be parsed or validated.
    """
    if config_path is None:
        config_path = next((path for path in DEFAULT_CONFIG_PATHS if path.exists()), None)

    path = Path(config_path) if config_path is not None else None
    if path is not None and not path.exists():
        raise create_config_error(f"Configuration file not found: {path}", path, missing=True)

    try:
        settings = Settings.from_toml_file(path) if path is not None else Settings()
    except toml.TomlDecodeError as e:
        raise create_config_error(f"Invalid TOML in configuration file: {e}", path, original_error=e) from e
    except ValidationError as e:
        raise create_config_error(f"Invalid configuration: {e}", path, original_error=e) from e

    logger.debug("Settings loaded from %s", path or "environment")
    return settings
