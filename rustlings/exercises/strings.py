"""String solutions: colours, trimming, composing, replacing and the longest text."""

from __future__ import annotations

__all__ = [
    "current_favorite_color",
    "is_a_color_word",
    "trim_me",
    "compose_me",
    "replace_me",
    "longest",
]

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """The favourite colour of the moment."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to the text."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def longest(x: str, y: str) -> str:
    """Return x if its UTF-8 encoding is strictly longer than y's, otherwise y."""
    if len(x.encode("utf-8")) > len(y.encode("utf-8")):
        return x
    return y