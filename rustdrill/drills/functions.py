"""Function drills."""


def call_me(num):
    """Print one ring line for each call number from 1 to ``num``."""
    for i in range(1, num + 1):
        print(f"Ring! Call number {i}")


def is_even(num):
    """Whether ``num`` is even."""
    return num % 2 == 0


def sale_price(price):
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num):
    """Return ``num`` squared."""
    return num * num