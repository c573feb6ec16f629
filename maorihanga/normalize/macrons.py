"""Māori text normalization: case folding and macron decomposition."""

from maorihanga.phonemes import LONG_MARKER, VOWELS


COMBINING_MACRON = "\u0304"

# Precomposed macron vowels and their base letters
MACRON_VOWELS: dict[str, str] = {
    "ā": "a",
    "ē": "e",
    "ī": "i",
    "ō": "o",
    "ū": "u",
}

# Base vowel followed by a combining macron
DECOMPOSED_MACRONS: dict[str, str] = {vowel + COMBINING_MACRON: vowel for vowel in VOWELS}


def normalize_maori(text: str, combining: bool = True) -> str:
    """
    Normalize Māori text for syllable matching.

    Lowercases the text and rewrites each macron vowel as its base vowel
    followed by LONG_MARKER. Nothing else is removed or altered; other
    combining marks are left where they are.

    Args:
        text: Input text
        combining: Also rewrite vowel + U+0304 sequences (default: True)

    Returns:
        Normalized text
    """
    result = text.lower()

    macrons = dict(MACRON_VOWELS)
    if combining:
        macrons.update(DECOMPOSED_MACRONS)

    for macron, base in macrons.items():
        result = result.replace(macron, base + LONG_MARKER)
    return result


def has_macrons(text: str) -> bool:
    """
    Check whether text still contains macron vowels.

    Args:
        text: Input text

    Returns:
        True if any precomposed macron vowel (either case) is present
    """
    return any(char in MACRON_VOWELS for char in text.lower())


def strip_long_markers(text: str) -> str:
    """Drop long-vowel markers, leaving bare base vowels."""
    return text.replace(LONG_MARKER, "")
