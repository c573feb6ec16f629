"""Māori to Māorihanga transliteration."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from maorihanga.models import Block, Layout, SyllableMatch
from maorihanga.normalize.macrons import normalize_maori
from maorihanga.normalize.syllables import iter_skipped, iter_syllables
from maorihanga.render.blocks import build_block


logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = " "


@dataclass
class TranslationResult:
    """Full record of one transliteration."""

    source: str
    normalized: str
    matches: list[SyllableMatch] = field(default_factory=list)
    blocks: list[Block] = field(default_factory=list)
    skipped: list[tuple[int, str]] = field(default_factory=list)

    @property
    def output(self) -> str:
        """Space-joined rendered blocks."""
        return BLOCK_SEPARATOR.join(block.render() for block in self.blocks).strip()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source": self.source,
            "normalized": self.normalized,
            "syllables": [match.to_dict() for match in self.matches],
            "blocks": [block.to_dict() for block in self.blocks],
            "skipped": "".join(char for _pos, char in self.skipped),
            "maorihanga": self.output,
        }


@dataclass
class BatchSummary:
    """Running totals over several transliterations."""

    lines: int = 0
    syllables: int = 0
    diphthongs: int = 0
    stacked_blocks: int = 0
    skipped_chars: int = 0

    def add(self, result: TranslationResult) -> None:
        """Fold one result into the totals."""
        self.lines += 1
        self.syllables += len(result.matches)
        self.diphthongs += sum(1 for match in result.matches if match.is_diphthong)
        self.stacked_blocks += sum(1 for block in result.blocks if block.layout is Layout.STACKED)
        self.skipped_chars += len(result.skipped)


def translate_to_maorihanga(text: str) -> str:
    """
    Transliterate Māori text into Māorihanga blocks.

    Args:
        text: Raw Māori text

    Returns:
        Rendered blocks joined by single spaces; empty if nothing matched

    Raises:
        PhonemeLookupError: On an internal table inconsistency
    """
    normalized = normalize_maori(text)
    blocks = [build_block(match).render() for match in iter_syllables(normalized)]
    return BLOCK_SEPARATOR.join(blocks).strip()


translate = translate_to_maorihanga


def analyze(text: str) -> TranslationResult:
    """
    Transliterate text and keep every intermediate step.

    Args:
        text: Raw Māori text

    Returns:
        Translation result with matches, blocks and skipped characters
    """
    normalized = normalize_maori(text)
    result = TranslationResult(source=text, normalized=normalized)

    for match in iter_syllables(normalized):
        result.matches.append(match)
        result.blocks.append(build_block(match))

    result.skipped = list(iter_skipped(normalized))

    logger.debug(
        f"Translated {len(result.matches)} syllables, skipped {len(result.skipped)} characters"
    )
    return result


def translate_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Transliterate each line independently.

    Args:
        lines: Input lines

    Yields:
        Transliterated lines
    """
    for line in lines:
        yield translate_to_maorihanga(line.rstrip("\n"))
