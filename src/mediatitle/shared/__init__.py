"""Shared constants and error types for mediatitle."""
