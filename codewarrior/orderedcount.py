"""Count character occurrences in order of first appearance."""

from __future__ import annotations

from collections import Counter
from typing import NamedTuple


class CharCount(NamedTuple):
    """A character and the number of times it occurs."""

    char: str
    count: int


def ordered_count(text: str) -> list[CharCount]:
    """Return each distinct character of ``text`` with its count, in order of first appearance."""
    return [CharCount(char, count) for char, count in Counter(text).items()]