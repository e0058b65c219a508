"""Case-aware alphabetical ordering of names."""

from __future__ import annotations


def lexicographic_less(i: str, j: str) -> bool:
    """Return True if ``i`` sorts before ``j``.

    Characters are compared case-insensitively first; where they differ only
    in case, the one with the lower code point comes first. When one string is
    a prefix of the other, plain string order decides.
    """
    for a, b in zip(i, j):
        lower_a, lower_b = a.lower(), b.lower()
        if lower_a != lower_b:
            return lower_a < lower_b
        if a != b:
            return a < b
    return i < j


def lexicographic_key(s: str) -> tuple[tuple[str, str], ...]:
    """Return a sort key that orders strings as :func:`lexicographic_less` does."""
    return tuple((c.lower(), c) for c in s)