"""Tests for DisplayTitleFormatter."""

from __future__ import annotations

import pytest

from mediatitle.core.parser.display import DisplayTitleFormatter
from mediatitle.core.parser.models import TVInfo
from mediatitle.shared.constants import DiagnosticTags


@pytest.fixture
def formatter():
    """Create a DisplayTitleFormatter instance for testing."""
    return DisplayTitleFormatter()


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("Sopranos.S01E01.1080p.mkv", "Sopranos S01E01"),
        ("Show.Name.S01E02.1080p.x264-GROUP.mkv", "Show Name S01E02"),
        ("Show.Name.2x05.mkv", "Show Name S02E05"),
        ("Show.Name.S10E123.mkv", "Show Name S10E123"),
        (
            "content://com.android.providers.downloads.documents/document/file%2FDownload%2FSopranos.S01E01.1080p.mkv",
            "Sopranos S01E01",
        ),
        ("/storage/emulated/0/Download/Sopranos.S01E01.1080p.mkv", "Sopranos S01E01"),
    ],
)
def test_tv_titles(formatter, filename, expected):
    """Test episodes use the zero-padded SxxEyy form."""
    assert formatter.format(filename) == expected


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("The.Matrix.1999.1080p.BluRay.mkv", "The Matrix (1999)"),
        ("Inception (2010) [YTS].mp4", "Inception (2010)"),
        ("Some.Movie.1080p.mkv", "Some Movie"),
        ("Movie.2100.mkv", "Movie 2100"),
    ],
)
def test_movie_titles(formatter, filename, expected):
    """Test movies get their year in parentheses when one is found."""
    assert formatter.format(filename) == expected


@pytest.mark.parametrize("filename", ["1080p.mkv", "1080p.S01E01.mkv", " "])
def test_falls_back_to_input(formatter, filename):
    """Test the raw input is returned when no title can be extracted."""
    assert formatter.format(filename) == filename


def test_extract_tv_info_uses_strong_rules_only(formatter):
    """Test absolute numbering is not TV info."""
    assert formatter.extract_tv_info("Show.S01E02.mkv") == TVInfo(title="Show", season=1, episode=2)
    assert formatter.extract_tv_info("Show - 01.mkv") is None
    assert formatter.extract_tv_info("One.Piece.1080.WEBRip.mkv") is None


def test_extract_year(formatter):
    """Test the display year range ends at 2099."""
    assert formatter.extract_year("Blade.Runner.2049.1982.mkv") == 2049
    assert formatter.extract_year("Movie.2100.mkv") is None
    assert formatter.extract_year("Movie.mkv") is None


def test_branch_is_reported(recording_sink):
    """Test the chosen branch is logged."""
    DisplayTitleFormatter(recording_sink).format("The.Matrix.1999.mkv")

    assert recording_sink.messages(DiagnosticTags.DISPLAY) == ["Movie display title: 'The Matrix (1999)'"]
