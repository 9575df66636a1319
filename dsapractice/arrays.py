"""Small array and matrix operations."""

from __future__ import annotations

from collections.abc import Sequence


def add_matrices(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if len(first) != len(second):
        raise ValueError("matrices have different numbers of rows")
    result = []
    for left_row, right_row in zip(first, second):
        if len(left_row) != len(right_row):
            raise ValueError("matrices have different numbers of columns")
        result.append([a + b for a, b in zip(left_row, right_row)])
    return result


def largest_number(values: Sequence[int]) -> int:
    """Return the largest value of a non-empty sequence."""
    if not values:
        raise ValueError("largest_number() of an empty sequence")
    largest = values[0]
    for value in values:
        if largest < value:
            largest = value
    return largest


def resize(values: Sequence[int], new_size: int) -> list[int]:
    """Return a copy of ``values`` cut or zero-padded to ``new_size`` items."""
    if new_size < 0:
        raise ValueError("new size must not be negative")
    kept = list(values[:new_size])
    return kept + [0] * (new_size - len(kept))