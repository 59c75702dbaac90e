"""Digit checks and decimal string parsing."""

from __future__ import annotations

import string
from functools import reduce

_DIGITS = frozenset(string.digits)


def is_only_digits(text: str) -> bool:
    """Tell whether every character of ``text`` is an ASCII digit."""
    return all(char in _DIGITS for char in text)


def parse_int(text: str) -> int:
    """Parse a string of ASCII digits as a non-negative integer.

    The empty string parses as 0. Any other character raises ValueError.
    """
    if not is_only_digits(text):
        raise ValueError(f"string contains more than just digits: {text!r}")
    return reduce(lambda number, char: number * 10 + ord(char) - ord("0"), text, 0)