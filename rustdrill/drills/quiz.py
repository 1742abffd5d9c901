"""Quiz drills: apple pricing, a string transformer and report cards."""

from dataclasses import dataclass
from enum import Enum


def calculate_price_of_apples(count):
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    apple_price = 1 if count > 40 else 2
    return apple_price * count


class CommandKind(Enum):
    """What the transformer does to a string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation; ``count`` is the number of appends for APPEND."""

    kind: CommandKind
    count: int = 0


def _apply(text, command):
    if command.kind is CommandKind.UPPERCASE:
        return text.upper()
    if command.kind is CommandKind.TRIM:
        return text.strip()
    return text + "bar" * command.count


def transformer(items):
    """Apply each (string, command) pair and return the resulting strings."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetic grade."""

    grade: object
    student_name: str
    student_age: int

    def render(self):
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )