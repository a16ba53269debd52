"""Build a square multiplication table."""

from __future__ import annotations


def multiplication_table(size: int) -> list[list[int]]:
    """Return a ``size`` by ``size`` table whose cell (i, j) holds (i + 1) * (j + 1)."""
    if size < 0:
        raise ValueError("size must not be negative")
    factors = range(1, size + 1)
    return [[row * column for column in factors] for row in factors]