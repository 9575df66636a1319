"""Searching sequences of numbers."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence[int], element: int) -> int:
    """Return an index of ``element`` in the sorted ``values``.

    Raises ValueError when the element is absent.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == element:
            return mid
        if values[mid] < element:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError(f"{element!r} is not in the sequence")


def linear_search(values: Sequence[int], element: int) -> list[int]:
    """Return every index at which ``element`` occurs, in order."""
    return [index for index, value in enumerate(values) if value == element]