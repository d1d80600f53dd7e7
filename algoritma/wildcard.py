"""Wildcard matching with ``?`` for one character and ``*`` for any run."""

from __future__ import annotations


def wildcard_match(text: str, pattern: str) -> bool:
    """Return True if ``pattern`` matches the whole of ``text``.

    A pattern character equal to the text character always consumes exactly
    one character of each, before ``?`` and ``*`` are considered.
    """
    m = len(pattern)
    star_suffix = [True] * (m + 1)
    for j in range(m - 1, -1, -1):
        star_suffix[j] = pattern[j] == "*" and star_suffix[j + 1]

    below = star_suffix
    for char in reversed(text):
        row = [False] * (m + 1)
        for j in range(m - 1, -1, -1):
            symbol = pattern[j]
            if char == symbol or symbol == "?":
                row[j] = below[j + 1]
            elif symbol == "*":
                row[j] = row[j + 1] or below[j]
        below = row
    return below[0]