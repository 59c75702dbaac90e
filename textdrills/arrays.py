"""Small operations on sequences of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def sum_matching_elements(values: Iterable[int]) -> int:
    """Sum every element whose value occurs more than once.

    Each repeated value contributes ``value * occurrences``. Values that
    occur only once contribute nothing.
    """
    counts = Counter(values)
    return sum(value * count for value, count in counts.items() if count > 1)


def reverse_array(values: Iterable[int]) -> list[int]:
    """Return the elements in reverse order."""
    return list(values)[::-1]


def max_element(values: Iterable[int]) -> int:
    """Return the largest element, starting the search from zero.

    An empty sequence, or one with no element above zero, yields 0.
    """
    return max(values, default=0) if _any_positive(values) else 0


def _any_positive(values: Iterable[int]) -> bool:
    return any(value > 0 for value in values)


def sort_ascending(values: Iterable[int]) -> list[int]:
    """Return the elements sorted from smallest to largest."""
    return sorted(values)