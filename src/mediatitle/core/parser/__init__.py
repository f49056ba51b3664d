"""Parser module for media filename cleaning.

This module provides the two extraction pipelines: the pattern cascade
behind ``clean`` and the token-boundary extractor behind
``extract_display_title``.
"""

from mediatitle.core.parser.models import CascadeMatch, ExtractionResult, TVInfo
from mediatitle.core.parser.name_cleaner import NameCleaner, clean, extract_display_title

__all__ = [
    "CascadeMatch",
    "ExtractionResult",
    "NameCleaner",
    "TVInfo",
    "clean",
    "extract_display_title",
]
