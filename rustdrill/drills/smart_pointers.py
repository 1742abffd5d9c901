"""Shared, recursive and copy-on-write data drills."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


def offset_sums(numbers, workers=8):
    """Sum, on one thread per offset, the numbers ``n`` with ``n % workers == offset``."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset):
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass(frozen=True)
class Cons:
    """A cons cell; the empty list is ``None``."""

    head: int
    tail: "Cons | None" = None

    def __iter__(self):
        cell = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list():
    """The empty cons list."""
    return None


def create_non_empty_list():
    """A cons list holding 1 and 2."""
    return Cons(1, Cons(2))


def abs_all(values):
    """Absolute values; the input is returned untouched if nothing is negative."""
    if all(v >= 0 for v in values):
        return values
    return [-v if v < 0 else v for v in values]