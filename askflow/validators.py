"""Regular-expression validators for text answers."""

import re
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Validator:
    """A pattern that the whole answer must match, with a failure message.

    When ``skip_next_if_match`` is set, a match ends validation
    successfully and a mismatch passes on to the next validator.
    """

    pattern: str
    message: str = ""
    skip_next_if_match: bool = False

    def matches(self, text: str) -> bool:
        """Whether ``text`` matches the pattern in full."""
        return re.fullmatch(self.pattern, text) is not None


def find_failure(validators: Iterable[Validator], text: str) -> Optional[Validator]:
    """Return the first validator ``text`` fails, or None if it passes."""
    for validator in validators:
        if validator.matches(text):
            if validator.skip_next_if_match:
                return None
        elif not validator.skip_next_if_match:
            return validator
    return None


def make(pattern: str, message: str = "", skip_next_if_match: bool = False) -> Validator:
    """Create a validator from a pattern."""
    return Validator(pattern, message, skip_next_if_match)


def optional(message: str = "") -> Validator:
    """Accept blank input outright; otherwise defer to later validators."""
    return make(r"^\s*$", message, True)


def required(message: str = "Required") -> Validator:
    """Reject blank input."""
    return make(r"^(?!\s*$).+", message)


def min_length(n: int, message: str = "") -> Validator:
    """Require at least ``n`` characters."""
    return make(f"^.{{{n},}}$", message or f"Minimum length is {n}")


def max_length(n: int, message: str = "") -> Validator:
    """Allow at most ``n`` characters."""
    return make(f"^.{{0,{n}}}$", message or f"Maximum length is {n}")


def number(message: str = "Must be an integer") -> Validator:
    """Require an optionally negative integer."""
    return make(r"^-?\d+$", message)


def floating(message: str = "Must be a float") -> Validator:
    """Require an optionally negative decimal number."""
    return make(r"^-?\d+(\.\d+)?$", message)


def lowercase(message: str = "Must be lowercase") -> Validator:
    """Require lowercase ASCII letters only."""
    return make(r"^[a-z]+$", message)


def uppercase(message: str = "Must be uppercase") -> Validator:
    """Require uppercase ASCII letters only."""
    return make(r"^[A-Z]+$", message)


def email(message: str = "Invalid email format") -> Validator:
    """Require something shaped like an e-mail address."""
    return make(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", message)