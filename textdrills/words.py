"""Word-level queries over whitespace-separated text.

A word is a run of characters other than space, tab and newline. A word
is taken into account only once such a separator ends it, so a trailing
word with nothing after it is ignored.
"""

from __future__ import annotations

from collections.abc import Iterator

_SEPARATORS = frozenset(" \t\n")
# Words this long or longer are never reported as the shortest.
_MAX_WORD = 20


def _terminated_words(text: str) -> Iterator[str]:
    start = 0
    for index, char in enumerate(text):
        if char in _SEPARATORS:
            if index > start:
                yield text[start:index]
            start = index + 1


def longest_word(text: str) -> str | None:
    """Return the first longest terminated word, or None if there is none."""
    best: str | None = None
    for word in _terminated_words(text):
        if best is None or len(word) > len(best):
            best = word
    return best


def shortest_word(text: str) -> str | None:
    """Return the first shortest terminated word under 20 characters, or None."""
    best: str | None = None
    for word in _terminated_words(text):
        if len(word) < (len(best) if best is not None else _MAX_WORD):
            best = word
    return best


def largest_and_smallest_words(text: str) -> tuple[str | None, str | None]:
    """Return the longest and the shortest word together."""
    return longest_word(text), shortest_word(text)


def count_word_occurrences(text: str, word: str) -> int:
    """Count the terminated words equal to ``word``."""
    return sum(1 for candidate in _terminated_words(text) if candidate == word)