"""Conversion of answer strings into typed values."""

import re
import struct

_WS = "[ \t\n\v\f\r]*"
_INT_RE = re.compile(_WS + r"[+-]?[0-9]+")
_DEC_RE = re.compile(
    _WS + r"([+-]?)((?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_HEX_RE = re.compile(
    _WS + r"([+-]?)(0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
)
_SPECIAL_RE = re.compile(
    _WS + r"([+-]?)(inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE
)

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_FLT_MIN = 1.1754943508222875e-38


def as_boolean(value: str) -> bool:
    """Interpret ``"true"`` or ``"false"``; anything else is an error."""
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"Expected a boolean, but received: {value}")


def as_int(value: str) -> int:
    """Parse a base-10 integer that spans the whole string.

    Leading whitespace and a sign are accepted; an empty string gives 0.
    The result is narrowed to a 32-bit signed integer.
    """
    if value == "":
        return 0
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"Expected an integer, but received: {value}")
    result = int(value.strip(" \t\n\v\f\r"))
    if not _LONG_MIN <= result <= _LONG_MAX:
        raise ValueError(f"Expected an integer, but received: {value}")
    return (result + 2**31) % 2**32 - 2**31


def _parse_float(value: str) -> float:
    for pattern, convert in (
        (_HEX_RE, float.fromhex),
        (_DEC_RE, float),
        (_SPECIAL_RE, lambda s: float(s.split("(")[0])),
    ):
        found = pattern.fullmatch(value)
        if found:
            sign, body = found.groups()
            number = convert(body)
            return -number if sign == "-" else number
    raise ValueError(f"Expected a float, but received: {value}")


def as_float(value: str) -> float:
    """Parse a single-precision float that spans the whole string.

    Out-of-range values, in either direction, are an error; an empty
    string gives 0.0.
    """
    if value == "":
        return 0.0
    number = _parse_float(value)
    try:
        (narrowed,) = struct.unpack("f", struct.pack("f", number))
    except OverflowError:
        raise ValueError(f"Expected a float, but received: {value}") from None
    if number != 0.0 and number == number and abs(narrowed) < _FLT_MIN:
        raise ValueError(f"Expected a float, but received: {value}")
    return narrowed