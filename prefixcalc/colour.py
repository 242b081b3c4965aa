"""ANSI colour codes for terminal output."""

from enum import Enum


class Colour(str, Enum):
    """Terminal escape sequences for the colours used in messages."""

    LIGHT_BLUE = "\033[1;36m"
    BLUE = "\x1b[34m"
    RED = "\033[31m"
    PURPLE = "\033[35m"
    YELLOW = "\033[33m"
    GREEN = "\x1b[32m"
    CLEAR = "\033[0m"


def paint(text, colour):
    """Wrap ``text`` in the escape code of ``colour`` followed by a reset."""
    return f"{Colour(colour).value}{text}{Colour.CLEAR.value}"