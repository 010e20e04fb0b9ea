"""Building new strings: slicing, joining, trimming, splitting and mapping."""

from __future__ import annotations

from typing import Callable, List, NamedTuple

_TRIM_CHARS = " \n\t"


def _require_str(*values: object) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected a str, got {type(value).__name__}")


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


class ConcatResult(NamedTuple):
    """Outcome of :func:`bounded_concat`."""

    text: str
    length: int


def substring(s: str, start: int, length: int) -> str:
    """The ``length`` characters of ``s`` starting at ``start``."""
    _require_str(s)
    _require_non_negative(start=start, length=length)
    if start + length > len(s):
        raise ValueError("substring runs past the end of the string")
    return s[start : start + length]


def concat(s1: str, s2: str) -> str:
    """A new string holding ``s1`` followed by ``s2``."""
    _require_str(s1, s2)
    return s1 + s2


def trim(s: str) -> str:
    """``s`` without leading and trailing spaces, newlines and tabs."""
    _require_str(s)
    return s.strip(_TRIM_CHARS)


def split(s: str, sep: str) -> List[str]:
    """The non-empty words of ``s`` separated by runs of ``sep``."""
    _require_str(s, sep)
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def map_chars(s: str, func: Callable[[str], str]) -> str:
    """A new string made of ``func`` applied to each character."""
    _require_str(s)
    return "".join(func(ch) for ch in s)


def map_chars_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character."""
    _require_str(s)
    return "".join(func(index, ch) for index, ch in enumerate(s))


def reverse(s: str) -> str:
    """``s`` with its characters in reverse order."""
    _require_str(s)
    return s[::-1]


def copy_n(s: str, n: int) -> str:
    """Exactly ``n`` characters: the start of ``s``, padded with NULs."""
    _require_str(s)
    _require_non_negative(n=n)
    return s[:n].ljust(n, "\0")


def concat_n(dest: str, src: str, n: int) -> str:
    """``dest`` followed by at most ``n`` characters of ``src``."""
    _require_str(dest, src)
    _require_non_negative(n=n)
    return dest + src[:n]


def bounded_concat(dest: str, src: str, size: int) -> ConcatResult:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    One character of the buffer is kept for the terminator, so the text
    holds at most ``size - 1`` characters. ``length`` is the length the
    text would have had without truncation: the length of ``dest`` (capped
    at ``size``) plus the length of ``src``. When ``dest`` already fills
    the buffer it is returned unchanged.
    """
    _require_str(dest, src)
    _require_non_negative(size=size)
    dest_len = min(len(dest), size)
    room = size - dest_len
    length = dest_len + len(src)
    if room == 0:
        return ConcatResult(dest, length)
    return ConcatResult(dest + src[: room - 1], length)