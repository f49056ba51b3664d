"""Core extraction pipeline, diagnostics and logging setup."""
