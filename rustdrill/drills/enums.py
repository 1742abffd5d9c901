"""Enum drill: a small state machine driven by messages."""

from dataclasses import dataclass, field


@dataclass
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


@dataclass(frozen=True)
class Echo:
    """Print a piece of text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Change to a new RGB colour."""

    color: tuple


@dataclass
class State:
    """Colour, position and quit flag updated by processing messages."""

    color: tuple = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def change_color(self, color):
        self.color = tuple(color)

    def echo(self, text):
        print(text)

    def move_position(self, point):
        self.position = point

    def process(self, message):
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")