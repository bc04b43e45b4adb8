"""Conversions between integers and their decimal text."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\r\f"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    One sign may precede the digits; parsing stops at the first non-digit.
    Text without a number gives 0. The result wraps like a 32-bit int.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = ""
    for char in stripped:
        if not "0" <= char <= "9":
            break
        digits += char
    return _wrap_int(sign * int(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(n)


def number_length(n: int) -> int:
    """Return how many characters the decimal text of ``n`` takes, sign included."""
    return len(str(n))