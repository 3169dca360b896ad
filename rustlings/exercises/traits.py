"""Trait solutions: appending "Bar" and shared licensing information."""

from __future__ import annotations

from functools import singledispatch

__all__ = [
    "append_bar",
    "Licensed",
    "SomeSoftware",
    "OtherSoftware",
    "compare_license_types",
]


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return f"{value}Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        return "some information"


class SomeSoftware(Licensed):
    """One piece of licensed software."""


class OtherSoftware(Licensed):
    """Another piece of licensed software."""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()