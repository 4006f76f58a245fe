"""Interpretation of level counts.

A count is kept as raw text in the AST. A run of digits repeats the level that
many times; a single letter expands to a lettered range starting at ``a`` (or
``A`` for upper case) and ending at that letter.
"""

import re
import string
from enum import Enum
from typing import Optional

NUMERIC_PATTERN = re.compile(r"[0-9]+")
LETTER_PATTERN = re.compile(r"[a-zA-Z]")


class CountKind(Enum):
    """How a count fans a level out into siblings."""

    NUMERIC = "numeric"
    LETTER_RANGE = "letter-range"


def classify_count(count: str) -> Optional[CountKind]:
    """Determine the kind of a raw count.

    Args:
        count: Raw count text from the AST

    Returns:
        The count kind, or None if the text is not a valid count
    """
    if NUMERIC_PATTERN.fullmatch(count):
        return CountKind.NUMERIC
    if LETTER_PATTERN.fullmatch(count):
        return CountKind.LETTER_RANGE
    return None


def numeric_values(count: str) -> list[str]:
    """Suffixes ``1``..``N`` for a numeric count (empty for zero)."""
    return [str(i) for i in range(1, int(count) + 1)]


def letter_values(end: str) -> list[str]:
    """Suffixes from ``a`` (or ``A``) up to and including ``end``."""
    alphabet = string.ascii_lowercase if end.islower() else string.ascii_uppercase
    return list(alphabet[: alphabet.index(end) + 1])


def count_values(count: str) -> list[str]:
    """Expand a raw count into ordered name suffixes.

    Args:
        count: Raw count text

    Returns:
        Suffixes appended to the level name, in ascending order

    Raises:
        ValueError: If the count is neither a non-negative integer nor a single letter
    """
    kind = classify_count(count)
    if kind is CountKind.NUMERIC:
        return numeric_values(count)
    if kind is CountKind.LETTER_RANGE:
        return letter_values(count)
    raise ValueError(
        f"Invalid count '{count}'. Expected a non-negative integer or a single letter"
    )
