"""Conditional drills."""


def bigger(a, b):
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish):
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"