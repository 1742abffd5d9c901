"""Struct drills: colours, orders and packages."""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    """An RGB colour with named fields."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """An RGB colour accessed by position."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True, repr=False)
class UnitLikeStruct:
    """A struct without fields."""

    def __repr__(self):
        return "UnitLikeStruct"


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template():
    """The template order that others are built from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A package to ship between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self):
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self):
        """Whether sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram):
        """Shipping fee in cents."""
        return self.weight_in_grams * cents_per_gram