"""
System Configuration Constants

This module contains logging defaults shared by the configuration models
and the diagnostic sinks.
"""

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================


class Logging:
    """Logging configuration constants."""

    MAX_BYTES = 10485760  # 10MB
    BACKUP_COUNT = 5
    DEFAULT_LEVEL = "INFO"
    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
    DEFAULT_ENCODING = "utf-8"
    DIAGNOSTICS_LOGGER = "mediatitle.diagnostics"
