"""Option drill: how much ice cream is left."""


def maybe_icecream(time_of_day):
    """Pieces left at a 24-hour time: 5 before 22, 0 until 23, None after."""
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day > 23:
        return None
    if time_of_day >= 22:
        return 0
    return 5