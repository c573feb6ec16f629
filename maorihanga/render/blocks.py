"""Block assembly for matched syllables."""

from maorihanga.models import Block, Layout, SyllableMatch
from maorihanga.phonemes import onset_glyph, vowel_glyph


# Layout is keyed on the base letter of the first vowel only
VOWEL_LAYOUT: dict[str, Layout] = {
    "a": Layout.SIDE_BY_SIDE,
    "e": Layout.SIDE_BY_SIDE,
    "i": Layout.SIDE_BY_SIDE,
    "o": Layout.STACKED,
    "u": Layout.STACKED,
}


def layout_for(vowel: str) -> Layout:
    """
    Choose the block layout for a first vowel.

    Args:
        vowel: Base vowel letter

    Returns:
        STACKED for o/u, SIDE_BY_SIDE otherwise
    """
    return VOWEL_LAYOUT.get(vowel, Layout.SIDE_BY_SIDE)


def build_block(match: SyllableMatch) -> Block:
    """
    Resolve glyphs and layout for a syllable match.

    Diphthongs render as the two vowel glyphs side by side, each with its
    own long marker.

    Args:
        match: Syllable match

    Returns:
        Unrendered block

    Raises:
        PhonemeLookupError: If a grapheme in the match has no table entry
    """
    onset = onset_glyph(match.consonant)

    vowel = vowel_glyph(match.vowel1, match.long1)
    if match.vowel2 is not None:
        vowel += vowel_glyph(match.vowel2, match.long2)

    return Block(onset=onset, vowel=vowel, layout=layout_for(match.vowel1))


def render_block(match: SyllableMatch) -> str:
    """Render a syllable match straight to its block string."""
    return build_block(match).render()
