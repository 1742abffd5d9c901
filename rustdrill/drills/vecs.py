"""Vector drills."""


def array_and_vec():
    """Return a fixed array and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(values):
    """Double every element of ``values`` in place and return it."""
    for i, value in enumerate(values):
        values[i] = value * 2
    return values


def vec_map(values):
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]