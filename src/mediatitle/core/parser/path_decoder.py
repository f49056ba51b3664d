"""Reduce URI-like identifiers to their final, decoded path segment.

Handles plain filenames as well as identifiers such as::

    /storage/emulated/0/Download/Sopranos.S01E01.1080p.mkv
    file:///storage/emulated/0/Download/Sopranos.S01E01.1080p.mkv
    content://provider/document/file%2FDownload%2FSopranos.S01E01.1080p.mkv
"""

from __future__ import annotations

from urllib.parse import unquote_plus

from mediatitle.core.diagnostics import DiagnosticSink, resolve_sink
from mediatitle.shared.constants import DiagnosticTags
from mediatitle.shared.constants.filename_patterns import MALFORMED_PERCENT_ESCAPE_PATTERN


class PathDecoder:
    """Strip query, scheme and directories, then percent-decode the name."""

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.sink = resolve_sink(sink)

    def decode(self, identifier: str) -> str:
        """Return the last path segment of identifier, percent-decoded.

        Decoding failures are not errors: the undecoded segment is returned.

        Args:
            identifier: Filename, path, or URI.

        Returns:
            The final segment of the decoded identifier.

        Examples:
            >>> PathDecoder().decode("content://x/file%2FDownload%2FShow.S01E01.mkv")
            'Show.S01E01.mkv'
        """
        base = last_segment(identifier.split("?", 1)[0])

        try:
            decoded = percent_decode(base)
        except ValueError as e:
            self.sink.log(DiagnosticTags.PATH, f"Decode failed for '{base}': {e}")
            return base

        # Decoding may expose embedded separators ("file/Download/Show...")
        result = last_segment(decoded)
        if result != base:
            self.sink.log(DiagnosticTags.PATH, f"Decoded '{base}' -> '{result}'")
        return result


def last_segment(path: str) -> str:
    """Return everything after the last '/' (the whole string if none)."""
    return path.rsplit("/", 1)[-1]


def percent_decode(value: str) -> str:
    """Decode form-style percent escapes ('+' becomes a space).

    Raises:
        ValueError: If value holds an incomplete escape or the escaped bytes
            are not valid UTF-8.
    """
    malformed = MALFORMED_PERCENT_ESCAPE_PATTERN.search(value)
    if malformed:
        msg = f"Incomplete percent escape at index {malformed.start()}"
        raise ValueError(msg)
    # UnicodeDecodeError is a ValueError subclass
    return unquote_plus(value, encoding="utf-8", errors="strict")
