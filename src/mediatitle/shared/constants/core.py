"""
Core Parsing Constants

This module contains all constants related to filename parsing defaults,
value ranges, and display formatting.
"""

from typing import Final


class ParsingDefaults:
    """Default values used when a filename carries no numbering."""

    SEASON = 1
    EPISODE = 1

    # A residual title must be longer than this to accept a year split
    MIN_YEAR_PREFIX_LENGTH = 1


class YearRange:
    """Plausible release year ranges."""

    # Range accepted by the structured result and the loose-absolute check
    MIN = 1900
    MAX = 2100

    # Range accepted for display titles and year tokens
    DISPLAY_MAX = 2099


class DisplayFormat:
    """Display title templates."""

    TV = "{title} S{season:02d}E{episode:02d}"
    MOVIE_WITH_YEAR = "{title} ({year})"


class DiagnosticTags:
    """Component tags passed to the diagnostic sink."""

    NAME_CLEANER = "NameCleaner"
    CASCADE = "PatternCascade"
    YEAR = "YearExtractor"
    JUNK = "JunkTagStripper"
    NORMALIZER = "FinalNormalizer"
    PATH = "PathDecoder"
    TOKENIZER = "TitleTokenizer"
    DISPLAY = "DisplayTitle"


RESULT_SEPARATOR: Final[str] = "=" * 40
