"""Filename pattern constants for media title extraction.

This module contains all regex patterns and keyword catalogs used for parsing
media filenames, following the One Source of Truth principle. Every pattern is
compiled once at import time and shared read-only by all callers.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

# =============================================================================
# SEASON / EPISODE PATTERNS
# =============================================================================

# Title prefixes are line-anchored and end on a non-separator character,
# which keeps searches linear on long separator runs.

# S01E01, S01 E01, s1e1 -> (title, season, episode)
SEASON_EPISODE_PATTERN: Final[Pattern[str]] = re.compile(
    r"^(.*?[^\s._-])[\s._-]+[Ss](\d+)[\s._-]*[Ee](\d+)",
    re.IGNORECASE | re.MULTILINE,
)

# 1x01, 1x1 -> (title, season, episode)
CROSS_PATTERN: Final[Pattern[str]] = re.compile(
    r"^(.*?[^\s._-])[\s._-]+(\d+)[xX](\d+)",
    re.MULTILINE,
)

# Episode 1, Ep 1, E1 -> (title, episode)
EPISODE_WORD_PATTERN: Final[Pattern[str]] = re.compile(
    r"^(.*?[^\s._-])[\s._-]+(?:Episode|Ep|E)[\s._-]*(\d+)",
    re.IGNORECASE | re.MULTILINE,
)

# Show - 01, Show - 01 - Title, Show - 01 [Group] -> (title, episode)
ANIME_ABSOLUTE_PATTERN: Final[Pattern[str]] = re.compile(
    r"^(.*?\S)\s*-\s*(\d{1,4})(?:\s*-|\s*\[|\s*\(|$)",
    re.IGNORECASE,
)

# Show.1080.WEBRip, Show 100 -> (title, episode)
# (?![pPi\d]) keeps "1080p" and "1080i" from reading as episode 1080
LOOSE_ABSOLUTE_PATTERN: Final[Pattern[str]] = re.compile(
    r"^(.*?[^\s._-])[\s._-]+(\d{1,4})(?![pPi\d])(?:[\s._-]+|$)",
    re.IGNORECASE,
)

# =============================================================================
# YEAR PATTERN
# =============================================================================

# Movie Title (2023), Movie.Title.2023. -> (title, year), year in 1900..2100
YEAR_PATTERN: Final[Pattern[str]] = re.compile(
    r"^(.*?[^\s._\-(])[\s._\-(]+(19\d{2}|20\d{2}|2100)[)\s._-]",
    re.MULTILINE,
)

# =============================================================================
# JUNK (SCENE) TAG PATTERNS
# =============================================================================

# Every entry must be anchored on word boundaries or separators so it never
# matches inside a title word.
JUNK_TAG_PATTERNS: Final[tuple[str, ...]] = (
    # Resolutions
    r"\b(2160|1080|720|480|576)[pP]\b",
    r"\b(4|8)[kK]\b",
    r"\b(UHD|HD|SD)\b",
    # Sources
    r"\b(BluRay|BDRip|BRRip|BD|DVD|DVDRip|DVDScr|R5)\b",
    r"\b(WEB-DL|WEBRip|WEB|HDTV|PDTV|CAM|TS|TC|REMUX)\b",
    # Codecs
    r"\b((x|h)\.?264|(x|h)\.?265|HEVC|AVC|DivX|XviD|MPEG)\b",
    # Audio
    r"\b(TrueHD|DTS-HD|DTS|Atmos|DD(\+|P)?\s*5\.1|DD|AAC|AC3|EAC3|FLAC|MP3)\b",
    r"\b(5\.1|7\.1|2\.0)\b",
    # HDR / video specs
    r"\b(HDR(10)?(\+)?|Dolby\s*Vision|DV|10bit|12bit|Hi10P|SDR)\b",
    r"\b(AI\s*Upscale|Upscaled)\b",
    # Release types
    r"\b(REPACK|PROPER|REAL|INTERNAL|FESTIVAL|STV|LIMITED|UNRATED|DC|EXTENDED"
    r"|REMASTERED|COMPLETE|RESTORED|UNCUT|DIRECTOR'?S\s*CUT)\b",
    # Languages
    r"\b(MULTI|DUAL|LATINO|FRENCH|GERMAN|SPANISH|ITA|RUS|JAP|ENG|SUB|DUB)\b",
    # Groups and hashes, bracketed after a separator
    r"[\s._-]\[[^\]]+\]",
    r"[\s._-]\([^\)]+\)",
    # -Group at the very end
    r"-[\w\d]+$",
)

JUNK_TAG_PATTERN: Final[Pattern[str]] = re.compile(
    "|".join(JUNK_TAG_PATTERNS),
    re.IGNORECASE,
)

# =============================================================================
# FINAL NORMALIZATION PATTERNS
# =============================================================================

VIDEO_EXTENSION_PATTERN: Final[Pattern[str]] = re.compile(
    r"\.(mkv|mp4|avi|webm|mov)$",
    re.IGNORECASE,
)
WHITESPACE_PATTERN: Final[Pattern[str]] = re.compile(r"\s+")
# Trailing hyphen run, including "Title - -" leftovers of stripped tags
TRAILING_HYPHENS_PATTERN: Final[Pattern[str]] = re.compile(r"(?<![\s-])[\s-]*-$")

# =============================================================================
# TOKENIZER PATTERNS
# =============================================================================

# Trailing [YTS] / {rarbg} group at the end of a name
TRAILING_BRACKET_GROUP_PATTERN: Final[Pattern[str]] = re.compile(
    r"[\[{].*[\]}]\s*$",
)
SURROUNDING_QUOTES_PATTERN: Final[Pattern[str]] = re.compile(
    r"^[\"'\s]+|(?<![\"'\s])[\"'\s]+$",
)
# "%" not followed by two hex digits
MALFORMED_PERCENT_ESCAPE_PATTERN: Final[Pattern[str]] = re.compile(
    r"%(?![0-9A-Fa-f]{2})",
)

YEAR_TOKEN_PATTERN: Final[Pattern[str]] = re.compile(r"\d{4}")
RESOLUTION_TOKEN_PATTERN: Final[Pattern[str]] = re.compile(r"\d+p")
AUDIO_TOKEN_PATTERN: Final[Pattern[str]] = re.compile(r"ddp\d+\.\d+")
CODEC_TOKEN_PATTERN: Final[Pattern[str]] = re.compile(r"(x|h)\.?\d+")

# Lowercase words that mark the end of a title
BOUNDARY_WORDS: Final[frozenset[str]] = frozenset(
    {
        # Source / type
        "webrip", "web", "webdl", "web-dl", "web-dlrip", "hdtv", "dvdrip",
        "bdrip", "bluray", "blu-ray", "remux", "hdrip", "cam", "telesync",
        "ts", "tc",
        # Resolution
        "480p", "576p", "720p", "1080p", "1440p", "2160p", "4k", "8k", "uhd",
        "hd", "sd",
        # Codecs
        "x264", "x265", "h264", "h265", "hevc", "avc", "divx", "xvid", "vp9",
        "av1", "h.264", "h.265",
        # Audio
        "aac", "ac3", "eac3", "ddp", "dts", "truehd", "atmos", "mp3", "flac",
        "7.1", "5.1", "2.0", "ddp5.1", "dts-hd", "truehd7.1",
        # Misc tags
        "hdr", "hdr10", "dv", "dolbyvision", "10bit", "8bit", "remastered",
        "extended", "unrated", "directors", "director's", "cut", "proper",
        "repack", "limited", "internal", "subbed", "dubbed", "multisub", "nf",
        "amzn", "hmax", "dsnp",
    },
)
