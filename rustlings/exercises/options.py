"""Option solution: how much ice cream is left at a given hour."""

from __future__ import annotations

__all__ = ["maybe_icecream"]


def maybe_icecream(time_of_day: int) -> int | None:
    """Five before 22:00, none left at 22 and 23, None for an invalid hour."""
    if 0 <= time_of_day <= 21:
        return 5
    if 22 <= time_of_day <= 23:
        return 0
    return None