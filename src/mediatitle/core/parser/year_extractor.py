"""Release year extraction.

The year must sit after a separator or opening parenthesis and be followed by
a separator or closing parenthesis, e.g. ``Movie.Title.2023.`` or
``Movie Title (2023)``. Only years in 1900..2100 are recognized.
"""

from __future__ import annotations

from mediatitle.core.parser.models import YearMatch
from mediatitle.shared.constants import ParsingDefaults
from mediatitle.shared.constants.filename_patterns import YEAR_PATTERN


class YearExtractor:
    """Find the first separator-delimited year and the title before it."""

    def find(self, text: str) -> YearMatch | None:
        """Return the first year in text and the trimmed prefix before it.

        Args:
            text: Filename or working title.

        Returns:
            YearMatch, or None if no delimited year is present.

        Examples:
            >>> YearExtractor().find("Movie.Title.2023.1080p.mkv")
            YearMatch(title='Movie.Title', year=2023)
        """
        match = YEAR_PATTERN.search(text)
        if not match:
            return None
        return YearMatch(title=match.group(1).strip(), year=int(match.group(2)))

    def split_title(self, text: str) -> YearMatch | None:
        """Split a working title into (title, year).

        Same as find(), but rejects matches whose prefix is too short to be a
        title (e.g. "A.2024.mkv").
        """
        found = self.find(text)
        if found is None or len(found.title) <= ParsingDefaults.MIN_YEAR_PREFIX_LENGTH:
            return None
        return found
