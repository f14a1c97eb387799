"""Substring search and word splitting for raw XPM text."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _until_nul(text: str) -> str:
    """Return the part of ``text`` before the first NUL character."""
    return text.split("\0", 1)[0]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Return the index of ``needle`` in ``text``, or -1.

    ``limit`` is the number of characters the caller considers available;
    a needle longer than that is never found. Searching stops at the first
    NUL character.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return _until_nul(text).find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    text = _until_nul(text)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]