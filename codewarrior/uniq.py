"""Collapse runs of equal adjacent items."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby


def uniq(items: Iterable[str]) -> list[str]:
    """Return the items with consecutive duplicates reduced to one, like the Unix ``uniq``."""
    return [item for item, _ in groupby(items)]