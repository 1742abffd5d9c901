"""Trait drills: appending "Bar", shared licensing and combined behaviours."""

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str):
    return value + "Bar"


@append_bar.register
def _(value: list):
    return [*value, "Bar"]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self):
        return "some information"


@dataclass
class SomeSoftware(Licensed):
    """One licensed program."""


@dataclass
class OtherSoftware(Licensed):
    """Another licensed program."""


def compare_license_types(software, software_two):
    """Whether two licensed items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Provides some_function."""

    def some_function(self):
        return True


class OtherTrait:
    """Provides other_function."""

    def other_function(self):
        return True


@dataclass
class SomeStruct(SomeTrait, OtherTrait):
    """Has both behaviours."""


@dataclass
class OtherStruct(SomeTrait, OtherTrait):
    """Also has both behaviours."""


def some_func(item):
    """Call both behaviours of an item that has them."""
    if not (isinstance(item, SomeTrait) and isinstance(item, OtherTrait)):
        raise TypeError(f"{type(item).__name__} lacks SomeTrait or OtherTrait")
    return item.some_function() and item.other_function()