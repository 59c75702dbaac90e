"""Counting and frequency queries over the characters of a string."""

from __future__ import annotations

import re
import string
from collections import Counter

_DIGITS = frozenset(string.digits)
_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_VOWELS = frozenset("aeiouAEIOU")
_LETTERS = frozenset(string.ascii_letters)
_WORD_BREAK = re.compile(r"[ \t\n]+")


def count_digits(text: str) -> int:
    """Return how many ASCII digits ``text`` holds."""
    return sum(1 for char in text if char in _DIGITS)


def count_char(text: str, char: str) -> int:
    """Return how many times the single character ``char`` occurs in ``text``."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return text.count(char)


def char_frequencies(text: str) -> dict[str, int]:
    """Map each character to its number of occurrences, in order of first appearance."""
    return dict(Counter(text))


def non_matching_chars(text: str) -> list[str]:
    """Return the ASCII letters and digits that occur exactly once, ordered by code."""
    counts = Counter(text)
    return sorted(
        (char for char, count in counts.items() if count == 1 and char in _ALPHANUMERIC),
        key=ord,
    )


def count_vowels(text: str) -> int:
    """Return how many vowels (a, e, i, o, u in either case) ``text`` holds."""
    return sum(1 for char in text if char in _VOWELS)


def vowel_consonant_counts(text: str) -> tuple[int, int]:
    """Return the number of vowels and of other ASCII letters in ``text``."""
    vowels = count_vowels(text)
    letters = sum(1 for char in text if char in _LETTERS)
    return vowels, letters - vowels


def count_words(text: str) -> int:
    """Count runs of characters separated by spaces, tabs or newlines."""
    return sum(1 for word in _WORD_BREAK.split(text) if word)


def first_non_repeating_char(text: str) -> str | None:
    """Return the first character that occurs only once, or None if there is none."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), None)


def duplicate_chars(text: str) -> list[str]:
    """Return the characters that occur more than once, ordered by code."""
    counts = Counter(text)
    return sorted((char for char, count in counts.items() if count > 1), key=ord)


def sort_chars(text: str) -> str:
    """Return each distinct character of ``text`` once, in ascending code order."""
    return "".join(sorted(set(text), key=ord))


def most_frequent_char(text: str) -> str | None:
    """Return the most frequent non-space character.

    Ties go to the character that appears first; None when there is no
    character other than spaces.
    """
    counts = Counter(char for char in text if char != " ")
    if not counts:
        return None
    return max(counts, key=counts.__getitem__)