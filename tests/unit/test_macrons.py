"""Tests for Māori text normalization."""

from maorihanga.normalize.macrons import has_macrons, normalize_maori, strip_long_markers
from maorihanga.phonemes import LONG_MARKER


def test_normalize_lowercases():
    """Test case folding."""
    assert normalize_maori("KIA ORA") == "kia ora"


def test_normalize_macrons():
    """Test macron decomposition into base vowel plus marker."""
    assert normalize_maori("āēīōū") == "a·e·i·o·u·"
    assert normalize_maori("Mā te rā ka mōhio") == "ma· te ra· ka mo·hio"


def test_normalize_uppercase_macrons():
    """Test that uppercase macron vowels are lowered first."""
    assert normalize_maori("ĀTAAHUA") == "a·taahua"


def test_normalize_combining_macron():
    """Test that a base vowel plus combining macron counts as long."""
    assert normalize_maori("ma\u0304") == "ma" + LONG_MARKER
    assert normalize_maori("MA\u0304") == "ma" + LONG_MARKER
    assert normalize_maori("ma\u0304", combining=False) == "ma\u0304"


def test_normalize_keeps_other_combining_marks():
    """Test that accents other than the macron are not composed."""
    assert normalize_maori("ke\u0301") == "ke\u0301"
    assert normalize_maori("E\u0301") == "e\u0301"


def test_normalize_keeps_other_characters():
    """Test that punctuation, digits and foreign letters survive."""
    assert normalize_maori("Kia ora, 2024! (b)") == "kia ora, 2024! (b)"


def test_normalize_idempotent():
    """Test that normalizing normalized text is a no-op."""
    once = normalize_maori("Tēnā koutou katoa")
    assert normalize_maori(once) == once
    assert not has_macrons(once)


def test_has_macrons():
    """Test macron detection."""
    assert has_macrons("Tēnā")
    assert has_macrons("Ō")
    assert not has_macrons("tena")


def test_strip_long_markers():
    """Test marker removal."""
    assert strip_long_markers(normalize_maori("whānau")) == "whanau"
