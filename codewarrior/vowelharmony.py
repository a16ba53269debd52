"""Hungarian dative suffix chosen by vowel harmony."""

from __future__ import annotations

_FRONT_VOWELS = frozenset("eéiíöőüű")
_BACK_VOWELS = frozenset("aáoóuú")


def dative(word: str) -> str:
    """Return the dative form of a Hungarian word, decided by its last vowel.

    Raises ValueError if the word has no vowel.
    """
    for char in reversed(word):
        if char in _FRONT_VOWELS:
            return word + "nek"
        if char in _BACK_VOWELS:
            return word + "nak"
    raise ValueError("invalid word")