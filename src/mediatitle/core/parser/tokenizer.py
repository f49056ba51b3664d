"""Token-boundary title extraction.

Instead of deleting known tags, the tokenizer walks the name left to right and
keeps every token until it reaches the first piece of release metadata (year,
resolution, codec, source, audio, ...). Everything from that boundary on is
dropped, which also discards unknown tags that follow known ones.
"""

from __future__ import annotations

import logging

from mediatitle.core.diagnostics import DiagnosticSink, resolve_sink
from mediatitle.core.parser.path_decoder import PathDecoder
from mediatitle.shared.constants import DiagnosticTags, YearRange
from mediatitle.shared.constants.filename_patterns import (
    AUDIO_TOKEN_PATTERN,
    BOUNDARY_WORDS,
    CODEC_TOKEN_PATTERN,
    RESOLUTION_TOKEN_PATTERN,
    SURROUNDING_QUOTES_PATTERN,
    TRAILING_BRACKET_GROUP_PATTERN,
    WHITESPACE_PATTERN,
    YEAR_TOKEN_PATTERN,
)

logger = logging.getLogger(__name__)


def is_year_token(token: str) -> bool:
    """Check if token is a bare year in 1900..2099."""
    return bool(YEAR_TOKEN_PATTERN.fullmatch(token)) and YearRange.MIN <= int(token) <= YearRange.DISPLAY_MAX


def is_boundary_token(token: str) -> bool:
    """Check if token is release metadata rather than title content.

    Examples:
        >>> is_boundary_token("1080p"), is_boundary_token("(1999)"), is_boundary_token("Matrix")
        (True, True, False)
    """
    lower = token.lower()
    if lower in BOUNDARY_WORDS or is_year_token(lower):
        return True
    if (
        RESOLUTION_TOKEN_PATTERN.fullmatch(lower)
        or AUDIO_TOKEN_PATTERN.fullmatch(lower)
        or CODEC_TOKEN_PATTERN.fullmatch(lower)
    ):
        return True
    return token.startswith("(") and token.endswith(")") and is_year_token(token[1:-1])


def tokenize(name: str) -> list[str]:
    """Split a decoded, extension-less name into title tokens.

    Underscores and dots become spaces; hyphens are kept as standalone
    ``-`` tokens so they still mark a boundary.
    """
    normalized = name.replace("_", " ").replace(".", " ").replace("-", " - ")
    normalized = WHITESPACE_PATTERN.sub(" ", normalized).strip()
    return [token for token in normalized.split(" ") if token]


def drop_group_suffix(tokens: list[str]) -> list[str]:
    """Drop a trailing ``-GROUP`` suffix, keeping at least the first token."""
    if not tokens or not tokens[-1].startswith("-"):
        return tokens
    dash_index = max(i for i, token in enumerate(tokens) if token.startswith("-"))
    return tokens[:dash_index] if dash_index > 0 else tokens


class TokenBoundaryTitleExtractor:
    """Extract the longest run of leading tokens that are not release metadata."""

    def __init__(self, sink: DiagnosticSink | None = None, path_decoder: PathDecoder | None = None) -> None:
        self.sink = resolve_sink(sink)
        self.path_decoder = path_decoder or PathDecoder(self.sink)

    def extract(self, filename: str, *, strip_extension: bool = True) -> str:
        """Return the title portion of filename, or an empty string.

        Args:
            filename: Filename, path or URI.
            strip_extension: Drop the text after the last dot. Pass False for
                names already cut before their metadata, where the last dot
                separates title words.

        Returns:
            The title, possibly empty.

        Examples:
            >>> TokenBoundaryTitleExtractor().extract("The.Matrix.1999.1080p.BluRay.mkv")
            'The Matrix'
        """
        base = self.path_decoder.decode(filename)

        if strip_extension:
            base = base.rsplit(".", 1)[0]

        # [YTS], {rarbg}
        if base.rstrip().endswith(("]", "}")):
            base = TRAILING_BRACKET_GROUP_PATTERN.sub("", base)

        tokens = drop_group_suffix(tokenize(base))

        title_tokens: list[str] = []
        for token in tokens:
            if is_boundary_token(token):
                self.sink.log(DiagnosticTags.TOKENIZER, f"Boundary token '{token}' ends title")
                break
            title_tokens.append(token)

        title = SURROUNDING_QUOTES_PATTERN.sub("", " ".join(title_tokens)).strip()
        self.sink.log(DiagnosticTags.TOKENIZER, f"Token title for '{filename}': '{title}'")
        if not title:
            logger.debug("No title tokens before first boundary in: %s", filename)
        return title
