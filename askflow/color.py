"""ANSI escape sequences used when drawing prompts."""

from enum import Enum


class Color(str, Enum):
    """Terminal colours as ANSI SGR escape sequences."""

    RESET = "\033[0m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    B_BLACK = "\033[1;30m"
    B_RED = "\033[1;31m"
    B_GREEN = "\033[1;32m"
    B_YELLOW = "\033[1;33m"
    B_BLUE = "\033[1;34m"
    B_MAGENTA = "\033[1;35m"
    B_CYAN = "\033[1;36m"
    B_WHITE = "\033[1;37m"

    def __str__(self) -> str:
        return self.value

    def wrap(self, text: str) -> str:
        """Return ``text`` in this colour, followed by a reset."""
        return f"{self.value}{text}{Color.RESET.value}"