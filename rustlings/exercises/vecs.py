"""Vector solutions: arrays alongside lists and doubling every element."""

from __future__ import annotations

__all__ = ["array_and_vec", "vec_loop", "vec_map"]


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    a = (0, 1, 1, 8)
    v = [0, 1, 1, 8]
    return a, v


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    for i, value in enumerate(values):
        values[i] = value * 2
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]