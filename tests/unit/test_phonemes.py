"""Tests for the phoneme table."""

import pytest

from maorihanga.phonemes import (
    CONSONANTS,
    LONG_MARKER,
    PHONEME_TABLE,
    PLACEHOLDER_KEY,
    VOWELS,
    PhonemeLookupError,
    lookup,
    onset_glyph,
    vowel_glyph,
)


def test_every_grapheme_has_entry():
    """Test that all matchable graphemes are in the table."""
    for key in CONSONANTS + VOWELS + (PLACEHOLDER_KEY,):
        assert key in PHONEME_TABLE


def test_consonant_glyphs_distinct():
    """Test that no two consonants share a glyph."""
    glyphs = [PHONEME_TABLE[c] for c in CONSONANTS]
    assert len(set(glyphs)) == len(glyphs)


def test_lookup_known_keys():
    """Test lookups for a few fixed entries."""
    assert lookup("k") == "ㄱ"
    assert lookup("ng") == "ㄱ\u0307"
    assert lookup("a") == "ㅏ"
    assert lookup(PLACEHOLDER_KEY) == "ㅇ"


def test_lookup_unknown_key():
    """Test that unknown graphemes raise a lookup error."""
    with pytest.raises(PhonemeLookupError) as exc_info:
        lookup("z")

    assert isinstance(exc_info.value, KeyError)
    assert "'z'" in str(exc_info.value)


def test_table_is_read_only():
    """Test that the table cannot be mutated."""
    with pytest.raises(TypeError):
        PHONEME_TABLE["k"] = "x"  # type: ignore[index]


def test_vowel_glyph_long():
    """Test that long vowels append the marker once."""
    assert vowel_glyph("o") == "ㅗ"
    assert vowel_glyph("o", long=True) == "ㅗ" + LONG_MARKER


def test_onset_glyph_placeholder():
    """Test that a missing consonant uses the placeholder glyph."""
    assert onset_glyph(None) == PHONEME_TABLE[PLACEHOLDER_KEY]
    assert onset_glyph("wh") == "ㅍ"
