"""Searching in and comparing strings.

Searches return an index into the string, or ``None`` when nothing is
found. The end of a string behaves like C's terminating NUL: looking for
``"\\0"`` finds the position just past the last character.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _require_str(*values: object) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected a str, got {type(value).__name__}")


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or ``None``.

    Looking for the NUL character gives ``len(s)``.
    """
    _require_str(s)
    ch = _as_char(c)
    if ch == _NUL:
        index = s.find(_NUL)
        return len(s) if index == -1 else index
    index = s.find(ch)
    return None if index == -1 else index


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or ``None``.

    Looking for the NUL character gives ``len(s)``.
    """
    _require_str(s)
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def find_sub(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle`` in ``haystack``.

    An empty haystack never matches, not even an empty needle. An empty
    needle otherwise matches at 0.
    """
    _require_str(haystack, needle)
    if not haystack:
        return None
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index == -1 else index


def find_sub_n(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`find_sub`, but the match must lie in the first ``length`` characters.

    An empty needle matches at 0.
    """
    _require_str(haystack, needle)
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def compare(s1: str, s2: str) -> int:
    """Difference of the first unequal characters of two strings, else 0.

    The shorter string is treated as ending with a NUL, so a proper prefix
    compares lower than the longer string.
    """
    _require_str(s1, s2)
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """:func:`compare` limited to the first ``n`` characters."""
    _require_str(s1, s2)
    if n < 0:
        raise ValueError("n must not be negative")
    return compare(s1[:n], s2[:n])


def equal(s1: str, s2: str) -> bool:
    """True when the two strings compare equal."""
    return compare(s1, s2) == 0


def equal_n(s1: str, s2: str, n: int) -> bool:
    """True when the first ``n`` characters of the two strings compare equal."""
    return compare_n(s1, s2, n) == 0