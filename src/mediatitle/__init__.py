"""
mediatitle - Media filename metadata extraction

Extracts show/movie title, season, episode, release year and an absolute
(anime) numbering flag from unstructured media filenames, paths and URIs.
"""

__version__ = "0.1.0"

from .core.diagnostics import DiagnosticSink, LoggingDiagnosticSink, NullDiagnosticSink
from .core.parser import ExtractionResult, NameCleaner, clean, extract_display_title

__all__ = [
    "DiagnosticSink",
    "ExtractionResult",
    "LoggingDiagnosticSink",
    "NameCleaner",
    "NullDiagnosticSink",
    "clean",
    "extract_display_title",
]
