"""Find the index of the first element satisfying a predicate."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def find_in_array(array: Iterable[Any], predicate: Callable[[Any, int], bool]) -> int:
    """Return the index of the first element for which ``predicate(value, index)`` holds, or -1."""
    return next(
        (index for index, value in enumerate(array) if predicate(value, index)),
        -1,
    )