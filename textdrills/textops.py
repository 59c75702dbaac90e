"""Basic string manipulations on ASCII text."""

from __future__ import annotations

import string
from itertools import zip_longest

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def reverse_string(text: str) -> str:
    """Return the characters of ``text`` in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def string_length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def concatenate(first: str, second: str) -> str:
    """Return ``second`` appended to ``first``."""
    return first + second


def compare_strings(first: str, second: str) -> int:
    """Compare two strings by character code.

    Returns 0 when equal, otherwise the code difference at the first
    position where they differ; a missing character counts as code 0.
    """
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def to_upper(text: str) -> str:
    """Convert ASCII lower-case letters to upper case."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Convert ASCII upper-case letters to lower case."""
    return text.translate(_TO_LOWER)


def remove_spaces(text: str) -> str:
    """Drop every space character; other whitespace is kept."""
    return text.replace(" ", "")


def remove_duplicate_chars(text: str) -> str:
    """Keep only the first occurrence of each character, in order."""
    return "".join(dict.fromkeys(text))


def remove_special_chars(text: str) -> str:
    """Keep only ASCII letters and digits."""
    return "".join(char for char in text if char in _ALPHANUMERIC)


def swap_first_and_last(text: str) -> str:
    """Swap the first and last characters; shorter strings are unchanged."""
    if len(text) < 2:
        return text
    return text[-1] + text[1:-1] + text[0]


def toggle_case(text: str) -> str:
    """Lower-case ASCII letters at even positions and upper-case those at odd ones.

    Positions count every character, letters or not.
    """
    return "".join(
        _toggle(char, index) if char in string.ascii_letters else char
        for index, char in enumerate(text)
    )


def _toggle(char: str, index: int) -> str:
    return char.translate(_TO_LOWER) if index % 2 == 0 else char.translate(_TO_UPPER)


def find_substring(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern``, or -1."""
    if not text:
        return -1
    return text.find(pattern)