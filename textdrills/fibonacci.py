"""Fibonacci sequences built iteratively and recursively."""

from __future__ import annotations


def fibonacci_iterative(length: int) -> list[int]:
    """Return 0, 1 followed by every term from index 2 up to ``length``.

    The result always starts with 0 and 1 and holds ``length + 1`` terms
    once ``length`` is at least 1.
    """
    terms = [0, 1]
    a, b = 0, 1
    for _ in range(2, length + 1):
        a, b = b, a + b
        terms.append(b)
    return terms


def fibonacci_recursive(length: int) -> list[int]:
    """Return the first ``length`` Fibonacci terms, never fewer than two."""
    return [0, 1, *_continue(0, 1, length)]


def _continue(a: int, b: int, length: int) -> list[int]:
    if length < 3:
        return []
    c = a + b
    return [c, *_continue(b, c, length - 1)]