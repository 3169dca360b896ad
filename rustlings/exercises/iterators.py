"""Iterator solutions: capitalisation, division results, factorial and counting."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Mapping, Sequence

__all__ = [
    "capitalize_first",
    "capitalize_words_vector",
    "capitalize_words_string",
    "DivisionError",
    "NotDivisibleError",
    "DivideByZeroError",
    "divide",
    "result_with_list",
    "list_of_results",
    "factorial",
    "Progress",
    "count_for",
    "count_iterator",
    "count_collection_for",
    "count_collection_iterator",
]

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word."""
    return [capitalize_first(w) for w in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them together."""
    return "".join(capitalize_first(w) for w in words)


class DivisionError(ArithmeticError):
    """Raised by divide()."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide a by b when b divides a evenly."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide each number by 27; raise on the first failure."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping failures in place as errors."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, 27))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """The factorial of a non-negative number fitting in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result


class Progress(Enum):
    """How far an exercise has been worked on."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using a loop."""
    count = 0
    for progress in mapping.values():
        if progress is value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress is value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)