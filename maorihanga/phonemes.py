"""Māori grapheme to Hangul Jamo glyph table."""

import logging
from types import MappingProxyType


logger = logging.getLogger(__name__)

# Long-vowel marker written in place of a macron
LONG_MARKER = "·"  # Middle dot

# Onset glyph for vowel-initial syllables (silent ieung)
PLACEHOLDER_KEY = "VOWEL_PL"

# Combining dot above, marks the nasal member of a consonant pair
NASAL_DOT = "̇"

# Digraphs are listed first so scanners can try them before single letters
DIGRAPHS: tuple[str, ...] = ("ng", "wh")
SINGLE_CONSONANTS: tuple[str, ...] = ("m", "p", "n", "t", "r", "k", "h", "w")
CONSONANTS: tuple[str, ...] = DIGRAPHS + SINGLE_CONSONANTS
VOWELS: tuple[str, ...] = ("a", "e", "i", "o", "u")

PHONEME_TABLE: MappingProxyType[str, str] = MappingProxyType(
    {
        # Consonants
        "ng": "ㄱ" + NASAL_DOT,  # Nasal
        "wh": "ㅍ",  # Fricative
        "m": "ㅁ" + NASAL_DOT,  # Nasal
        "p": "ㅁ",  # Base bilabial
        "n": "ㄴ" + NASAL_DOT,  # Nasal
        "t": "ㄴ",  # Base alveolar
        "r": "ㄹ",
        "k": "ㄱ",  # Base velar
        "h": "ㅎ",  # Glottal
        "w": "ㅂ",  # Labial glide
        # Vowels (long forms append LONG_MARKER)
        "a": "ㅏ",
        "e": "ㅓ",
        "i": "ㅣ",
        "o": "ㅗ",
        "u": "ㅡ",
        # Vowel-initial onset
        PLACEHOLDER_KEY: "ㅇ",  # Silent ieung
    }
)


class PhonemeLookupError(KeyError):
    """A grapheme has no entry in the phoneme table."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No phoneme table entry for grapheme {self.key!r}"


def lookup(key: str) -> str:
    """
    Look up the glyph for a grapheme.

    Args:
        key: Consonant, vowel or PLACEHOLDER_KEY

    Returns:
        Glyph string

    Raises:
        PhonemeLookupError: If the key is not in the table
    """
    try:
        return PHONEME_TABLE[key]
    except KeyError:
        logger.error(f"Phoneme table lookup failed for {key!r}")
        raise PhonemeLookupError(key) from None


def vowel_glyph(vowel: str, long: bool = False) -> str:
    """Glyph for a base vowel, with the long marker appended when long."""
    glyph = lookup(vowel)
    if long:
        return glyph + LONG_MARKER
    return glyph


def onset_glyph(consonant: str | None) -> str:
    """Glyph for a syllable onset; the placeholder when there is no consonant."""
    return lookup(consonant if consonant is not None else PLACEHOLDER_KEY)
