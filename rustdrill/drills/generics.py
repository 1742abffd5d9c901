"""Generics drill: a wrapper around a value of any type."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T