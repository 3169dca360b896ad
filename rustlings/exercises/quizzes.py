"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

__all__ = [
    "calculate_price_of_apples",
    "Command",
    "Uppercase",
    "Trim",
    "Append",
    "transformer",
    "ReportCard",
]

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def calculate_price_of_apples(n: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    price_per_apple = 1 if n > 40 else 2
    return n * price_per_apple


class Command:
    """An action applied to a string by transformer()."""


@dataclass(frozen=True)
class Uppercase(Command):
    """Upper-case the ASCII letters of the string."""


@dataclass(frozen=True)
class Trim(Command):
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append(Command):
    """Append "bar" the given number of times."""

    times: int


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.translate(_ASCII_UPPER))
            case Trim():
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


T = TypeVar("T")


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"