"""Coloured status lines printed to the terminal."""

import os

from rich.console import Console
from rich.text import Text

__all__ = ["no_emoji", "warn", "success"]


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _print_marked(symbol: str, fallback: str, message: str, colour: str) -> None:
    mark = fallback if no_emoji() else symbol
    line = Text(mark, style=colour)
    line.append(" ")
    line.append(message, style=colour)
    Console(highlight=False, soft_wrap=True).print(line)


def warn(message: str) -> None:
    """Print a red warning line."""
    _print_marked("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _print_marked("✅", "✓", message, "green")