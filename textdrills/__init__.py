"""Helpers for strings, words, digit strings and integer sequences."""

__version__ = "0.1.0"
__all__ = [
    "anagram",
    "arrays",
    "counting",
    "digits",
    "fibonacci",
    "textops",
    "words",
]