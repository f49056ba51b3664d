"""Ordered season/episode pattern cascade.

The cascade is a chain of rules tried in strict priority order; the first rule
that matches wins and later rules are never consulted:

1. Explicit season+episode: ``S01E02``, ``s1e1``, ``S01 E02``
2. Cross form: ``1x01``
3. Anime dash-absolute: ``Title - 01``, ``Title - 01 - Name``, ``Title - 01 [Group]``
4. Episode word: ``Episode 1``, ``Ep 1``, ``E1``
5. Loose absolute: a bare 1-4 digit number between separators, checked
   against the filename's year so ``Movie.2000.mkv`` is not episode 2000

Reordering the rules changes results; DEFAULT_RULES is the supported order.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from re import Pattern
from typing import ClassVar

from mediatitle.core.diagnostics import DiagnosticSink, resolve_sink
from mediatitle.core.parser.models import CascadeMatch
from mediatitle.core.parser.year_extractor import YearExtractor
from mediatitle.shared.constants import DiagnosticTags, ParsingDefaults, YearRange
from mediatitle.shared.constants.filename_patterns import (
    ANIME_ABSOLUTE_PATTERN,
    CROSS_PATTERN,
    EPISODE_WORD_PATTERN,
    LOOSE_ABSOLUTE_PATTERN,
    SEASON_EPISODE_PATTERN,
)

logger = logging.getLogger(__name__)


def _to_number(digits: str, default: int) -> int:
    """Convert captured digits, mapping 0 (e.g. S00 specials) to default.

    Digit runs too long for int() (see sys.get_int_max_str_digits) also fall
    back to default.
    """
    try:
        return int(digits) or default
    except ValueError:
        logger.debug("Number with %d digits out of range, using %d", len(digits), default)
        return default


class CascadeRule(ABC):
    """A single rule of the cascade."""

    name: ClassVar[str]
    pattern: ClassVar[Pattern[str]]

    @abstractmethod
    def try_extract(self, filename: str, sink: DiagnosticSink) -> CascadeMatch | None:
        """Return a partial result if this rule recognizes filename."""


class _SeasonEpisodeRule(CascadeRule):
    """Rules whose pattern captures (title, season, episode)."""

    def try_extract(self, filename: str, sink: DiagnosticSink) -> CascadeMatch | None:
        match = self.pattern.search(filename)
        if not match:
            return None
        result = CascadeMatch(
            title=match.group(1).strip(),
            season=_to_number(match.group(2), ParsingDefaults.SEASON),
            episode=_to_number(match.group(3), ParsingDefaults.EPISODE),
            rule=self.name,
        )
        sink.log(
            DiagnosticTags.CASCADE,
            f"Matched {self.name} pattern: '{result.title}' S{result.season} E{result.episode}",
        )
        return result


class ExplicitSeasonEpisodeRule(_SeasonEpisodeRule):
    """``Show.Name.S01E02`` style numbering."""

    name = "season_episode"
    pattern = SEASON_EPISODE_PATTERN


class CrossFormatRule(_SeasonEpisodeRule):
    """``Show.Name.1x02`` style numbering."""

    name = "cross"
    pattern = CROSS_PATTERN


class AnimeAbsoluteRule(CascadeRule):
    """``Show - 01`` absolute numbering, always season 1."""

    name = "anime_absolute"
    pattern = ANIME_ABSOLUTE_PATTERN

    def try_extract(self, filename: str, sink: DiagnosticSink) -> CascadeMatch | None:
        match = self.pattern.search(filename)
        if not match:
            return None
        result = CascadeMatch(
            title=match.group(1).strip(),
            season=ParsingDefaults.SEASON,
            episode=_to_number(match.group(2), ParsingDefaults.EPISODE),
            is_anime=True,
            rule=self.name,
        )
        sink.log(DiagnosticTags.CASCADE, f"Matched Anime pattern: '{result.title}' E{result.episode}")
        return result


class EpisodeWordRule(CascadeRule):
    """``Show Episode 5`` / ``Show Ep 5`` / ``Show E5``; season stays 1."""

    name = "episode_word"
    pattern = EPISODE_WORD_PATTERN

    def try_extract(self, filename: str, sink: DiagnosticSink) -> CascadeMatch | None:
        match = self.pattern.search(filename)
        if not match:
            return None
        result = CascadeMatch(
            title=match.group(1).strip(),
            season=ParsingDefaults.SEASON,
            episode=_to_number(match.group(2), ParsingDefaults.EPISODE),
            rule=self.name,
        )
        sink.log(DiagnosticTags.CASCADE, f"Matched Ep pattern: '{result.title}' E{result.episode}")
        return result


class LooseAbsoluteRule(CascadeRule):
    """Bare number fallback, e.g. ``One.Piece.1080.WEBRip``.

    The candidate is checked against the first year in the whole filename:

    - same value as that year: rejected, the number is the year
    - outside 1900..2100, or a different year exists: accepted as absolute
    - year-plausible with no year elsewhere: rejected

    A resolution without its unit (``Movie.1080.mkv``) is therefore read as
    episode 1080.
    """

    name = "loose_absolute"
    pattern = LOOSE_ABSOLUTE_PATTERN

    def __init__(self, year_extractor: YearExtractor | None = None) -> None:
        self.year_extractor = year_extractor or YearExtractor()

    def try_extract(self, filename: str, sink: DiagnosticSink) -> CascadeMatch | None:
        match = self.pattern.search(filename)
        if not match:
            return None

        title = match.group(1).strip()
        candidate = int(match.group(2))

        year_match = self.year_extractor.find(filename)
        is_likely_year = YearRange.MIN <= candidate <= YearRange.MAX

        if year_match is not None and year_match.year == candidate:
            sink.log(DiagnosticTags.CASCADE, f"Loose match {candidate} skipped (appears to be Year)")
            return None

        if is_likely_year and year_match is None:
            sink.log(DiagnosticTags.CASCADE, f"Loose match {candidate} skipped (year-like with no other year)")
            return None

        result = CascadeMatch(
            title=title,
            season=ParsingDefaults.SEASON,
            episode=_to_number(match.group(2), ParsingDefaults.EPISODE),
            is_anime=True,
            rule=self.name,
        )
        sink.log(DiagnosticTags.CASCADE, f"Matched Loose Absolute pattern: '{title}' E{result.episode}")
        return result


# The two strongest rules; also used on their own as the display TV probe
TV_RULES: tuple[CascadeRule, ...] = (ExplicitSeasonEpisodeRule(), CrossFormatRule())

DEFAULT_RULES: tuple[CascadeRule, ...] = (
    *TV_RULES,
    AnimeAbsoluteRule(),
    EpisodeWordRule(),
    LooseAbsoluteRule(),
)


class PatternCascade:
    """Evaluate rules in order and return the first match.

    Examples:
        >>> PatternCascade().extract("Show.Name.S01E02.1080p.mkv")
        CascadeMatch(title='Show.Name', season=1, episode=2, is_anime=False, rule='season_episode')
    """

    def __init__(
        self,
        rules: tuple[CascadeRule, ...] = DEFAULT_RULES,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.rules = rules
        self.sink = resolve_sink(sink)

    def extract(self, filename: str) -> CascadeMatch | None:
        """Return the first rule's match for filename, or None."""
        for rule in self.rules:
            result = rule.try_extract(filename, self.sink)
            if result is not None:
                logger.debug("Rule %s matched filename: %s", rule.name, filename)
                return result
        logger.debug("No cascade rule matched filename: %s", filename)
        return None
