"""Integer parsing, formatting and small arithmetic helpers."""

from __future__ import annotations

import math

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped and one optional sign is read. Parsing
    stops at the first non-digit; with no digits the result is 0. The
    value wraps to a signed 32-bit integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    return _wrap_int32(sign * int("".join(digits)))


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def number_length(n: int) -> int:
    """Number of characters in the decimal form of n, sign included."""
    return len(itoa(n))


def power(nb: int, exponent: int) -> int:
    """nb raised to a non-negative exponent; a negative exponent gives 0."""
    if exponent < 0:
        return 0
    return nb**exponent


def int_sqrt(nb: int) -> int:
    """Integer square root rounded down; 0 for values below 1."""
    if nb <= 0:
        return 0
    return math.isqrt(nb)