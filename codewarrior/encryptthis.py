"""Encrypt a message word by word."""

from __future__ import annotations


def _swap_ends(text: str) -> str:
    if len(text) < 2:
        return text
    return text[-1] + text[1:-1] + text[0]


def _encrypt_word(word: str) -> str:
    if not word:
        return ""
    return f"{ord(word[0])}{_swap_ends(word[1:])}"


def encrypt_this(text: str) -> str:
    """Encrypt each space-separated word.

    The first letter becomes its character code, and the second and last
    letters trade places.
    """
    return " ".join(_encrypt_word(word) for word in text.split(" "))