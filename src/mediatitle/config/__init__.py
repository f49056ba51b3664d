"""Configuration package for mediatitle."""

from mediatitle.config.loader import load_settings
from mediatitle.config.settings import DiagnosticsSettings, LoggingSettings, Settings

__all__ = [
    "DiagnosticsSettings",
    "LoggingSettings",
    "Settings",
    "load_settings",
]
