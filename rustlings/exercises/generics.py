"""Generics solution: a wrapper around a value of any type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Wrapper"]

T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T