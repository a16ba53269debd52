"""Count the combinations that can be built by picking one value from each array."""

from __future__ import annotations

from collections.abc import Iterable
from math import prod


def solve(data: Iterable[Iterable[int]]) -> int:
    """Return the number of distinct combinations, taking one element from each array.

    Duplicate values within an array count once.
    """
    return prod(len(set(values)) for values in data)