"""Error-handling solutions: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "generate_nametag_text",
    "total_cost",
    "spend_tokens",
    "CreationError",
    "PositiveNonzeroInteger",
    "ParsePosNonzeroError",
    "parse_pos_nonzero",
]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width the way the standard parser does."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens: five per item plus a processing fee of one."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    return qty * cost_per_item + processing_fee


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """Raised when a PositiveNonzeroInteger would be negative or zero."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __eq__(self, other) -> bool:
        if isinstance(other, CreationError):
            return self.reason == other.reason
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.reason)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised by parse_pos_nonzero; `cause` is the parse or creation error."""

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        self.cause = cause

    @property
    def is_creation(self) -> bool:
        return isinstance(self.cause, CreationError)

    def __eq__(self, other) -> bool:
        if isinstance(other, ParsePosNonzeroError):
            return type(self.cause) is type(other.cause) and str(self.cause) == str(
                other.cause
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self.cause), str(self.cause)))


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        value = _parse_int(s, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err