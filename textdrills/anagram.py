"""Anagram check."""

from __future__ import annotations


def is_anagram(first: str, second: str) -> bool:
    """Tell whether two strings can be taken as anagrams.

    They must have the same length, and every character of ``first`` must
    occur somewhere in ``second``. Repeated characters are not matched
    one for one.
    """
    if len(first) != len(second):
        return False
    available = set(second)
    return all(char in available for char in first)