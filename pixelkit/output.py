"""Writing characters, strings, numbers and bit patterns to text streams.

Every function takes an optional ``stream``. When it is omitted the
current ``sys.stdout`` is used.
"""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string; ``None`` writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; ``None`` writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))


def print_bits(
    value: int, bits: int, per_line: int, stream: Optional[TextIO] = None
) -> None:
    """Write the top whole bytes of a ``bits``-wide value as binary digits.

    Digits go from the most significant bit down. Only ``bits // 8`` whole
    bytes are written, starting at bit ``bits - 1``. A newline follows each
    digit after which the count of bits still to go is a multiple of
    ``per_line``.
    """
    if bits < 0:
        raise ValueError("bits must not be negative")
    if per_line <= 0:
        raise ValueError("per_line must be positive")
    out = _target(stream)
    remaining = bits
    written = 8 * (bits // 8)
    pieces = []
    for position in range(bits - 1, bits - 1 - written, -1):
        pieces.append("1" if (value >> position) & 1 else "0")
        remaining -= 1
        if remaining % per_line == 0:
            pieces.append("\n")
    out.write("".join(pieces))


def print_words(words: Iterable[str], stream: Optional[TextIO] = None) -> None:
    """Write each word on a line of its own."""
    out = _target(stream)
    for word in words:
        out.write(word + "\n")