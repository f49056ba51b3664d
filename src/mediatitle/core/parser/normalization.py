"""Scene tag stripping and final title normalization."""

from __future__ import annotations

from mediatitle.core.diagnostics import DiagnosticSink, resolve_sink
from mediatitle.shared.constants import DiagnosticTags
from mediatitle.shared.constants.filename_patterns import (
    JUNK_TAG_PATTERN,
    TRAILING_HYPHENS_PATTERN,
    VIDEO_EXTENSION_PATTERN,
    WHITESPACE_PATTERN,
)


class JunkTagStripper:
    """Replace resolution, source, codec, audio, language and group tags.

    All tags are matched in a single pass by one combined pattern and each
    match is replaced with a single space. Tags are anchored on word
    boundaries, so ``HD`` is removed from ``Show.HD.mkv`` but not from
    ``Shadow``.
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.sink = resolve_sink(sink)

    def strip(self, name: str) -> str:
        """Return name with every junk tag replaced by a space."""
        self.sink.log(DiagnosticTags.JUNK, f"Before junk removal: '{name}'")
        result = JUNK_TAG_PATTERN.sub(" ", name)
        self.sink.log(DiagnosticTags.JUNK, f"After junk removal: '{result}' (changed: {result != name})")
        return result


class FinalNormalizer:
    """Turn a stripped name into a display-ready title.

    Steps, in order: drop a video extension, turn dots and underscores into
    spaces, collapse whitespace, drop trailing hyphens. Normalizing an
    already-normalized string returns it unchanged.
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.sink = resolve_sink(sink)

    def normalize(self, name: str) -> str:
        """Apply all normalization steps to name."""
        before = name
        name = VIDEO_EXTENSION_PATTERN.sub("", name)
        self._log_step("Removed extension", before, name)

        before = name
        name = name.replace(".", " ").replace("_", " ")
        self._log_step("Dots/underscores -> spaces", before, name)

        before = name
        name = WHITESPACE_PATTERN.sub(" ", name).strip()
        self._log_step("Collapsed spaces", before, name)

        before = name
        name = TRAILING_HYPHENS_PATTERN.sub("", name).strip()
        self._log_step("Removed trailing hyphens", before, name)

        return name

    def _log_step(self, step: str, before: str, after: str) -> None:
        self.sink.log(DiagnosticTags.NORMALIZER, f"{step}: '{before}' -> '{after}'")
