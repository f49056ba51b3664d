"""Human-facing display titles.

Produces ``"Show Name S01E02"`` for episodes and ``"Movie Title (2023)"`` for
movies, falling back to the raw input when no title can be extracted.

For episodes the title before ``SxxEyy`` keeps its last dotted word, so
``Show.Name.S01E02.mkv`` displays as ``"Show Name S01E02"``. That title is
already cut before the metadata, so it has no extension to strip; treating its
last dot as one would drop ``Name`` and give ``"Show S01E02"``.
"""

from __future__ import annotations

from mediatitle.core.diagnostics import DiagnosticSink, resolve_sink
from mediatitle.core.parser.cascade import TV_RULES, CascadeRule
from mediatitle.core.parser.models import TVInfo
from mediatitle.core.parser.tokenizer import TokenBoundaryTitleExtractor
from mediatitle.core.parser.year_extractor import YearExtractor
from mediatitle.shared.constants import DiagnosticTags, DisplayFormat, YearRange


class DisplayTitleFormatter:
    """Compose display titles from TV info or movie info."""

    def __init__(
        self,
        sink: DiagnosticSink | None = None,
        tokenizer: TokenBoundaryTitleExtractor | None = None,
        year_extractor: YearExtractor | None = None,
        tv_rules: tuple[CascadeRule, ...] = TV_RULES,
    ) -> None:
        self.sink = resolve_sink(sink)
        self.tokenizer = tokenizer or TokenBoundaryTitleExtractor(self.sink)
        self.year_extractor = year_extractor or YearExtractor()
        self.tv_rules = tv_rules

    def extract_tv_info(self, filename: str) -> TVInfo | None:
        """Probe filename with the explicit season/episode and NxN rules only."""
        for rule in self.tv_rules:
            match = rule.try_extract(filename, self.sink)
            if match is not None:
                return TVInfo(title=match.title, season=match.season, episode=match.episode)
        return None

    def extract_year(self, filename: str) -> int | None:
        """Return the first delimited year in 1900..2099, or None."""
        found = self.year_extractor.find(filename)
        if found is None or found.year > YearRange.DISPLAY_MAX:
            return None
        return found.year

    def format(self, filename: str) -> str:
        """Return the display title for filename.

        Examples:
            >>> DisplayTitleFormatter().format("Sopranos.S01E01.1080p.mkv")
            'Sopranos S01E01'
            >>> DisplayTitleFormatter().format("The.Matrix.1999.1080p.BluRay.mkv")
            'The Matrix (1999)'
        """
        tv_info = self.extract_tv_info(filename)
        if tv_info is not None:
            # The probe title is already cut before SxxEyy, so it has no extension
            title = self.tokenizer.extract(tv_info.title, strip_extension=False)
            if title:
                result = DisplayFormat.TV.format(title=title, season=tv_info.season, episode=tv_info.episode)
                self.sink.log(DiagnosticTags.DISPLAY, f"TV display title: '{result}'")
                return result

        title = self.tokenizer.extract(filename)
        if title:
            year = self.extract_year(filename)
            result = DisplayFormat.MOVIE_WITH_YEAR.format(title=title, year=year) if year is not None else title
            self.sink.log(DiagnosticTags.DISPLAY, f"Movie display title: '{result}'")
            return result

        self.sink.log(DiagnosticTags.DISPLAY, f"No title extracted, using input: '{filename}'")
        return filename
