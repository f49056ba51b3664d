"""Command-line interface for mediatitle."""
