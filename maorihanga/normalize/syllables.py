"""Syllable matching over normalized Māori text.

Scans left to right with an explicit cursor. At each position the matcher
tries one unit of the shape (C?)(V)(L?)(V?)(L?):

  - C: an optional consonant, digraphs ``ng``/``wh`` before single letters
  - V: a mandatory base vowel
  - L: an optional long-vowel marker after each vowel

A second vowel is always taken when present. Positions that cannot start a
unit are skipped one character at a time and never show up in the output.
This is a simplified pattern, not Māori phonotactics.
"""

import logging
from collections.abc import Iterator

from maorihanga.models import SyllableMatch
from maorihanga.phonemes import DIGRAPHS, LONG_MARKER, SINGLE_CONSONANTS, VOWELS


logger = logging.getLogger(__name__)


def _match_consonant(text: str, pos: int) -> str | None:
    """Longest consonant grapheme starting at pos, if any."""
    pair = text[pos : pos + 2]
    if pair in DIGRAPHS:
        return pair
    if pos < len(text) and text[pos] in SINGLE_CONSONANTS:
        return text[pos]
    return None


def _match_vowel(text: str, pos: int) -> tuple[str | None, bool, int]:
    """Match a vowel and optional long marker at pos, returning the new cursor."""
    if pos >= len(text) or text[pos] not in VOWELS:
        return None, False, pos

    vowel = text[pos]
    pos += 1
    is_long = pos < len(text) and text[pos] == LONG_MARKER
    if is_long:
        pos += 1
    return vowel, is_long, pos


def match_at(text: str, pos: int) -> SyllableMatch | None:
    """
    Try to match one syllable starting exactly at pos.

    Args:
        text: Normalized text
        pos: Cursor position

    Returns:
        The match, or None if no syllable starts here
    """
    consonant = _match_consonant(text, pos)
    cursor = pos + len(consonant) if consonant else pos

    vowel1, long1, cursor = _match_vowel(text, cursor)
    if vowel1 is None:
        return None

    vowel2, long2, cursor = _match_vowel(text, cursor)

    return SyllableMatch(
        vowel1=vowel1,
        start=pos,
        end=cursor,
        consonant=consonant,
        long1=long1,
        vowel2=vowel2,
        long2=long2 if vowel2 is not None else False,
    )


def iter_syllables(text: str) -> Iterator[SyllableMatch]:
    """
    Yield non-overlapping syllable matches in scan order.

    Args:
        text: Normalized text

    Yields:
        Syllable matches
    """
    pos = 0
    while pos < len(text):
        match = match_at(text, pos)
        if match is None:
            logger.debug(f"No syllable at {pos}, skipping {text[pos]!r}")
            pos += 1
            continue

        logger.debug(f"Matched {match.text!r} at {match.start}:{match.end}")
        yield match
        pos = match.end


def iter_skipped(text: str) -> Iterator[tuple[int, str]]:
    """
    Yield characters the matcher passes over without a match.

    Args:
        text: Normalized text

    Yields:
        (position, character) tuples
    """
    pos = 0
    for match in iter_syllables(text):
        for idx in range(pos, match.start):
            yield idx, text[idx]
        pos = match.end

    for idx in range(pos, len(text)):
        yield idx, text[idx]


def syllabify(text: str) -> list[str]:
    """
    Split normalized text into matched syllable strings.

    Args:
        text: Normalized text

    Returns:
        List of matched spans, in order
    """
    return [text[match.start : match.end] for match in iter_syllables(text)]
