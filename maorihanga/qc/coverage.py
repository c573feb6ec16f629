"""Coverage checks: which input characters the matcher drops."""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from maorihanga.normalize.macrons import normalize_maori
from maorihanga.normalize.syllables import iter_skipped


# Separators that are expected to be dropped
EXPECTED_SKIPS = set(" \t\n.,;:!?-—()[]{}\"'")


@dataclass
class CoverageResult:
    """Result of a coverage check."""

    total_lines: int
    lines_with_issues: int
    unexpected_chars: Counter[str]
    examples: list[dict[str, str]]

    @property
    def ok(self) -> bool:
        """True when only separators were dropped."""
        return self.lines_with_issues == 0


def get_unexpected_skips(text: str) -> Counter[str]:
    """
    Count dropped characters that are not plain separators.

    Args:
        text: Raw input text

    Returns:
        Counter of unexpected skipped characters (normalized form)
    """
    normalized = normalize_maori(text)
    return Counter(char for _pos, char in iter_skipped(normalized) if char not in EXPECTED_SKIPS)


def check_coverage(
    lines: Iterable[str],
    logger: logging.Logger,
    max_examples: int = 10,
) -> CoverageResult:
    """
    Check how much of each input line survives transliteration.

    Args:
        lines: Input lines
        logger: Logger instance
        max_examples: Maximum number of examples to collect

    Returns:
        Coverage check result
    """
    unexpected_chars: Counter[str] = Counter()
    lines_with_issues = 0
    total_lines = 0
    examples: list[dict[str, str]] = []

    for line_no, line in enumerate(lines, start=1):
        total_lines += 1
        chars = get_unexpected_skips(line)

        if chars:
            lines_with_issues += 1
            unexpected_chars.update(chars)

            if len(examples) < max_examples:
                examples.append(
                    {
                        "line": str(line_no),
                        "text": line.strip()[:100],
                        "dropped": ", ".join(sorted(chars)),
                    }
                )

    logger.info(f"Found {lines_with_issues}/{total_lines} lines with dropped characters")

    return CoverageResult(
        total_lines=total_lines,
        lines_with_issues=lines_with_issues,
        unexpected_chars=unexpected_chars,
        examples=examples,
    )
