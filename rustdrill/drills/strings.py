"""String drills."""


def current_favorite_color():
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt):
    """Whether ``attempt`` is one of the known colour words."""
    return attempt in ("green", "blue", "red")


def trim_me(text):
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text):
    """Append " world!"."""
    return text + " world!"


def replace_me(text):
    """Replace "cars" with "balloons"."""
    return text.replace("cars", "balloons")