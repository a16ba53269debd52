"""Interleave terms from several Fibonacci-like sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

_SEQUENCES: dict[str, tuple[tuple[int, ...], Callable[[list[int]], int]]] = {
    "fib": ((0, 1), lambda a: a[0] + a[1]),
    "pad": ((1, 0, 0), lambda a: a[0] + a[1]),
    "jac": ((0, 1), lambda a: 2 * a[0] + a[1]),
    "pel": ((0, 1), lambda a: a[0] + 2 * a[1]),
    "tri": ((0, 0, 1), lambda a: a[0] + a[1] + a[2]),
    "tet": ((0, 0, 0, 1), lambda a: a[0] + a[1] + a[2] + a[3]),
}


def _terms(name: str) -> Iterator[int]:
    seed, step = _SEQUENCES[name]
    state = list(seed)
    while True:
        yield state[0]
        state = state[1:] + [step(state)]


def mixbonacci(pattern: Sequence[str], length: int) -> list[int]:
    """Return ``length`` terms, taking the next term of each sequence named by the cycling pattern.

    Known sequences: fib, pad, jac, pel, tri, tet.
    """
    if length == 0 or not pattern:
        return []
    unknown = sorted(set(pattern) - _SEQUENCES.keys())
    if unknown:
        raise ValueError(f"unknown sequence: {', '.join(unknown)}")
    sources = {name: _terms(name) for name in set(pattern)}
    return [next(sources[pattern[i % len(pattern)]]) for i in range(length)]