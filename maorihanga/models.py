"""Data models for Māorihanga transliteration."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from maorihanga.phonemes import LONG_MARKER


class Layout(str, Enum):
    """Arrangement of onset and vowel inside a block."""

    SIDE_BY_SIDE = "SIDE_BY_SIDE"
    STACKED = "STACKED"


@dataclass(frozen=True)
class SyllableMatch:
    """A syllable unit found by the matcher in normalized text."""

    vowel1: str
    start: int
    end: int
    consonant: str | None = None
    long1: bool = False
    vowel2: str | None = None
    long2: bool = False

    @property
    def is_diphthong(self) -> bool:
        """Whether a second vowel was captured."""
        return self.vowel2 is not None

    @property
    def text(self) -> str:
        """Rebuild the matched span in normalized form."""
        parts = [self.consonant or "", self.vowel1]
        if self.long1:
            parts.append(LONG_MARKER)
        if self.vowel2 is not None:
            parts.append(self.vowel2)
            if self.long2:
                parts.append(LONG_MARKER)
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "consonant": self.consonant,
            "vowel1": self.vowel1,
            "long1": self.long1,
            "vowel2": self.vowel2,
            "long2": self.long2 if self.vowel2 is not None else False,
        }


@dataclass(frozen=True)
class Block:
    """Rendered glyphs for one syllable, before bracketing."""

    onset: str
    vowel: str
    layout: Layout

    def render(self) -> str:
        """
        Render the block as a parenthesized string.

        Returns:
            ``(onset vowel)`` on one line, or a four-line stacked form
            with the onset above the vowel
        """
        if self.layout is Layout.STACKED:
            return f"(\n{self.onset}\n{self.vowel}\n)"
        return f"({self.onset}{self.vowel})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "onset": self.onset,
            "vowel": self.vowel,
            "layout": self.layout.value,
            "block": self.render(),
        }
