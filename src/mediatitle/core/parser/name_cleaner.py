"""Main entry points for media filename cleaning.

Two independent pipelines share the pattern definitions but no state:

- ``clean``: pattern cascade, year extraction, junk tag stripping and final
  normalization, producing an ExtractionResult.
- ``extract_display_title``: TV probe plus token-boundary title extraction,
  producing a display string.

Neither raises for any input string.
"""

from __future__ import annotations

import logging

from mediatitle.core.diagnostics import DiagnosticSink, resolve_sink
from mediatitle.core.parser.cascade import PatternCascade
from mediatitle.core.parser.display import DisplayTitleFormatter
from mediatitle.core.parser.models import ExtractionResult, TVInfo
from mediatitle.core.parser.normalization import FinalNormalizer, JunkTagStripper
from mediatitle.core.parser.tokenizer import TokenBoundaryTitleExtractor
from mediatitle.core.parser.year_extractor import YearExtractor
from mediatitle.shared.constants import DiagnosticTags, ParsingDefaults
from mediatitle.shared.constants.core import RESULT_SEPARATOR

logger = logging.getLogger(__name__)


class NameCleaner:
    """Facade wiring the extraction components around one diagnostic sink.

    Examples:
        >>> cleaner = NameCleaner()
        >>> result = cleaner.clean("Show.Name.S01E02.1080p.x264-GROUP.mkv")
        >>> result.title, result.season, result.episode
        ('Show Name', 1, 2)
        >>> cleaner.extract_display_title("Show.Name.S01E02.1080p.x264-GROUP.mkv")
        'Show Name S01E02'
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        """Initialize all pipeline components with a shared sink.

        Args:
            sink: Receives decision messages. Defaults to a no-op sink.
        """
        self.sink = resolve_sink(sink)
        self.year_extractor = YearExtractor()
        self.cascade = PatternCascade(sink=self.sink)
        self.junk_stripper = JunkTagStripper(self.sink)
        self.normalizer = FinalNormalizer(self.sink)
        self.tokenizer = TokenBoundaryTitleExtractor(self.sink)
        self.formatter = DisplayTitleFormatter(
            self.sink,
            tokenizer=self.tokenizer,
            year_extractor=self.year_extractor,
        )

    def clean(self, filename: str) -> ExtractionResult:
        """Extract title, season, episode, year and anime flag from filename.

        Args:
            filename: Filename to clean.

        Returns:
            ExtractionResult; season and episode default to 1 and year to
            None when the filename carries no such markers.
        """
        self.sink.log(DiagnosticTags.NAME_CLEANER, RESULT_SEPARATOR)
        self.sink.log(DiagnosticTags.NAME_CLEANER, f"CLEANING FILENAME: '{filename}'")

        name = filename
        season = ParsingDefaults.SEASON
        episode = ParsingDefaults.EPISODE
        is_anime = False
        year: int | None = None

        # 1. Season/episode cascade
        match = self.cascade.extract(filename)
        if match is not None:
            name = match.title
            season = match.season
            episode = match.episode
            is_anime = match.is_anime

        # 2. Year, when something is left before it
        year_match = self.year_extractor.split_title(name)
        if year_match is not None:
            name = year_match.title
            year = year_match.year
            self.sink.log(DiagnosticTags.YEAR, f"Extracted Year: '{name}' ({year})")

        # 3. Scene tags
        name = self.junk_stripper.strip(name)

        # 4. Extension, separators, whitespace, trailing hyphens
        name = self.normalizer.normalize(name)

        result = ExtractionResult(
            title=name,
            season=season,
            episode=episode,
            year=year,
            is_anime=is_anime,
        )
        self.sink.log(DiagnosticTags.NAME_CLEANER, f"FINAL RESULT: '{name}' S{season} E{episode}")
        self.sink.log(DiagnosticTags.NAME_CLEANER, f"  Year: {year}, IsAnime: {is_anime}")
        logger.debug("Cleaned %r -> %r", filename, result)
        return result

    def extract_display_title(self, filename: str) -> str:
        """Return "Title S01E02", "Title (2023)", "Title" or filename itself."""
        return self.formatter.format(filename)

    def extract_tv_info(self, filename: str) -> TVInfo | None:
        """Return raw TV numbering from the two strongest rules, if any."""
        return self.formatter.extract_tv_info(filename)

    def extract_year(self, filename: str) -> int | None:
        """Return the first delimited display year in filename, if any."""
        return self.formatter.extract_year(filename)

    def extract_title_from_tokens(self, filename: str) -> str:
        """Return the token-boundary title of filename (possibly empty)."""
        return self.tokenizer.extract(filename)


_DEFAULT_CLEANER = NameCleaner()


def _cleaner_for(sink: DiagnosticSink | None) -> NameCleaner:
    return _DEFAULT_CLEANER if sink is None else NameCleaner(sink)


def clean(filename: str, sink: DiagnosticSink | None = None) -> ExtractionResult:
    """Clean filename with the default pipeline.

    Examples:
        >>> clean("One.Piece.1080.WEBRip.mkv")
        ExtractionResult(title='One Piece', season=1, episode=1080, year=None, is_anime=True)
    """
    return _cleaner_for(sink).clean(filename)


def extract_display_title(filename: str, sink: DiagnosticSink | None = None) -> str:
    """Return the display title of filename with the default pipeline.

    Examples:
        >>> extract_display_title("content://x/file%2FDownload%2FSopranos.S01E01.1080p.mkv")
        'Sopranos S01E01'
    """
    return _cleaner_for(sink).extract_display_title(filename)
