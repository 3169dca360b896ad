"""Struct solutions: colour records, orders built from a template and packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

__all__ = [
    "ColorClassicStruct",
    "ColorTupleStruct",
    "UnitLikeStruct",
    "Order",
    "create_order_template",
    "Package",
]


@dataclass(frozen=True)
class ColorClassicStruct:
    """A colour with named components."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour whose components are reached by position."""

    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A type with no fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package sent between countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        """Whether sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee in cents."""
        return self.weight_in_grams * cents_per_gram