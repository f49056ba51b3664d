"""Data models for media filename parsing.

This module defines the value types produced by the extraction pipeline.
All of them are frozen: a result is built once per call and never mutated.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from mediatitle.shared.constants import ParsingDefaults, YearRange


@dataclass(frozen=True)
class ExtractionResult:
    """Result of cleaning a media filename.

    Attributes:
        title: Residual show or movie name after all stripping. May be empty.
        season: Season number, 1 when the filename carries none.
        episode: Episode number, 1 when the filename carries none.
        year: Release year in 1900..2100, or None.
        is_anime: True only when the episode came from absolute numbering
            (anime dash form or the loose-absolute fallback).
    """

    title: str
    season: int = ParsingDefaults.SEASON
    episode: int = ParsingDefaults.EPISODE
    year: int | None = None
    is_anime: bool = False

    def __post_init__(self) -> None:
        """Validate the numeric invariants.

        Raises:
            ValueError: If season or episode is below 1, or year is outside
                the plausible range.
        """
        if self.season < 1:
            msg = f"Season must be >= 1, got {self.season}"
            raise ValueError(msg)
        if self.episode < 1:
            msg = f"Episode must be >= 1, got {self.episode}"
            raise ValueError(msg)
        if self.year is not None and not YearRange.MIN <= self.year <= YearRange.MAX:
            msg = f"Year must be between {YearRange.MIN} and {YearRange.MAX}, got {self.year}"
            raise ValueError(msg)

    def has_year(self) -> bool:
        """Check if a release year was extracted."""
        return self.year is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a plain dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class CascadeMatch:
    """Partial result produced by a single cascade rule.

    Attributes:
        title: Captured prefix before the numbering marker, trimmed.
        season: Season number.
        episode: Episode number.
        is_anime: Whether the numbering is absolute.
        rule: Name of the rule that produced the match.
    """

    title: str
    season: int
    episode: int
    is_anime: bool = False
    rule: str = "unknown"


@dataclass(frozen=True)
class TVInfo:
    """Raw TV numbering found by the display pipeline's probe."""

    title: str
    season: int
    episode: int


@dataclass(frozen=True)
class YearMatch:
    """A year found by the year extractor and the text before it."""

    title: str
    year: int
