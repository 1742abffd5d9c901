"""Error-handling drills: name tags, token costs and positive integers."""

from dataclasses import dataclass
from enum import Enum


def _parse_int(text, bits):
    """Parse a signed decimal integer that must fit in ``bits`` bits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(text)
    high = (1 << (bits - 1)) - 1
    low = -(1 << (bits - 1))
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name):
    """Return the text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity):
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    return qty * cost_per_item + processing_fee


def purchase(tokens, item_quantity):
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(Enum):
    """Why a PositiveNonzeroInteger could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """Raised for a value that is not a positive nonzero integer."""

    def __init__(self, kind):
        super().__init__(kind.value)
        self.kind = kind


class ParsePosNonzeroError(ValueError):
    """Raised by parse_pos_nonzero; ``source`` is the underlying error."""

    def __init__(self, source):
        super().__init__(str(source))
        self.source = source

    @property
    def is_creation(self):
        return isinstance(self.source, CreationError)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


def parse_pos_nonzero(text):
    """Parse text into a PositiveNonzeroInteger, raising ParsePosNonzeroError."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err