"""Property-based fuzzing tests for the extraction pipelines using Hypothesis."""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from mediatitle.core.parser.models import ExtractionResult
from mediatitle.core.parser.name_cleaner import clean, extract_display_title
from mediatitle.core.parser.normalization import FinalNormalizer


@st.composite
def filename_strategy(draw):
    """Generate plausible release filenames.

    Args:
        draw: Hypothesis draw function.

    Returns:
        Generated filename string.
    """
    words = draw(
        st.lists(
            st.text(alphabet=st.characters(categories=("Lu", "Ll", "Nd")), min_size=1, max_size=10),
            min_size=1,
            max_size=5,
        ),
    )
    separator = draw(st.sampled_from([".", " ", "_", " - "]))
    parts = [separator.join(words)]

    if draw(st.booleans()):
        season = draw(st.integers(min_value=0, max_value=30))
        episode = draw(st.integers(min_value=0, max_value=2000))
        parts.append(draw(st.sampled_from([f"S{season:02d}E{episode:02d}", f"{season}x{episode:02d}", f"- {episode:02d}"])))
    if draw(st.booleans()):
        parts.append(str(draw(st.integers(min_value=1800, max_value=2200))))
    if draw(st.booleans()):
        parts.append(draw(st.sampled_from(["1080p", "720p", "WEBRip", "BluRay", "x264", "HEVC", "DDP5.1"])))
    if draw(st.booleans()):
        parts[-1] += "-" + draw(st.text(alphabet=st.characters(categories=("Lu",)), min_size=2, max_size=8))

    extension = draw(st.sampled_from([".mkv", ".mp4", ".avi", ".webm", ".mov", ""]))
    return separator.join(parts) + extension


def _check_invariants(result: ExtractionResult) -> None:
    assert result.season >= 1
    assert result.episode >= 1
    assert result.year is None or 1900 <= result.year <= 2100
    assert isinstance(result.title, str)


@given(st.text(max_size=200))
@settings(max_examples=300)
def test_clean_never_raises_on_arbitrary_text(text):
    """Test clean() holds its numeric invariants for any string."""
    _check_invariants(clean(text))


@given(filename_strategy())
@settings(max_examples=300)
def test_clean_invariants_on_release_names(filename):
    """Test clean() invariants on structured release names."""
    _check_invariants(clean(filename))


@given(st.text(min_size=1, max_size=200))
def test_display_title_never_empty(text):
    """Test extract_display_title() never returns an empty string."""
    assert extract_display_title(text) != ""


@given(filename_strategy())
def test_display_title_never_empty_on_release_names(filename):
    """Test display titles of release names are non-empty."""
    assert extract_display_title(filename)


@given(st.text(max_size=200))
def test_normalizer_idempotent(text):
    """Test normalizing a normalized title changes nothing."""
    normalizer = FinalNormalizer()
    once = normalizer.normalize(text)

    assert normalizer.normalize(once) == once
