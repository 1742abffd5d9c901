"""Terminal styling and status messages."""

import os

_STYLES = {
    "bold": "1",
    "dim": "2",
    "italic": "3",
    "underlined": "4",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
}
_RESET = "\x1b[0m"


def styled(text, *args):
    """Wrap ``text`` in the ANSI codes of the named styles."""
    text = str(text)
    if not args:
        return text
    try:
        codes = [_STYLES[name] for name in args]
    except KeyError as err:
        raise ValueError(f"unknown style: {err.args[0]!r}") from None
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def no_emoji():
    """Whether the NO_EMOJI environment variable asks for plain symbols."""
    return "NO_EMOJI" in os.environ


def warn(message):
    """Print a warning line in red."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(f"{styled(symbol, 'red')} {styled(message, 'red')}")


def success(message):
    """Print a success line in green."""
    symbol = "✓" if no_emoji() else "✅"
    print(f"{styled(symbol, 'green')} {styled(message, 'green')}")