"""Descending sort of the parsed numbers."""

from typing import Iterable


def sort_descending(numbers: Iterable[int]) -> list[int]:
    """Return a new list holding the same values, largest first."""
    return sorted(numbers, reverse=True)
