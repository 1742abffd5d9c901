"""Iterator drills: capitalising words, checked division, factorials and counting."""

import math
from enum import Enum

_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text):
    """Upper-case the first character of ``text`` and keep the rest as is."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words):
    """Capitalise every word and return the results as a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words):
    """Capitalise every word and join the results into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """Raised by divide when the division cannot be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend, divisor):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other):
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self):
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self):
        super().__init__("division by zero")

    def __eq__(self, other):
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self):
        return hash(DivideByZeroError)


def divide(a, b):
    """Return ``a / b`` if ``a`` is evenly divisible by ``b``; raise otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list():
    """Divide the sample numbers by 27; any failure is raised."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _attempt(a, b):
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results():
    """Divide the sample numbers by 27, keeping each quotient or its error."""
    return [_attempt(n, _DIVISOR) for n in _NUMBERS]


def factorial(num):
    """Return ``num!``."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))


class Progress(Enum):
    """How far an exercise has been worked through."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map, value):
    """Count entries of ``progress_map`` equal to ``value`` with an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map, value):
    """Count entries of ``progress_map`` equal to ``value``."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(collection, value):
    """Count matching entries across several maps with explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(collection, value):
    """Count matching entries across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)