"""Enum solution: a state machine driven by messages."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Point", "Quit", "Move", "Echo", "ChangeColor", "State"]


@dataclass(frozen=True)
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


@dataclass(frozen=True)
class Move:
    """Move to a new point."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Print a line of text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Change the RGB colour."""

    color: tuple[int, int, int]


Message = Quit | Move | Echo | ChangeColor


@dataclass
class State:
    """Colour, position and whether quitting was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit_requested: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quit_requested = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Quit():
                self.quit()
            case Move(point=point):
                self.move_position(point)
            case Echo(text=text):
                self.echo(text)
            case ChangeColor(color=color):
                self.change_color(color)
            case _:
                raise TypeError(f"unknown message: {message!r}")