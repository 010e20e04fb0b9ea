"""Byte-buffer operations: fill, copy, move, search and compare.

Buffers are ``bytearray`` objects (or anything supporting slice
assignment); read-only arguments may be any bytes-like object. Byte
values are reduced to their low eight bits. Asking for more bytes than a
buffer holds raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional

BytesLike = bytes | bytearray | memoryview


def _check_length(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer size {len(buf)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value``."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memccpy(dest: bytearray, src: BytesLike, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dest`` up to and including byte ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dest`` just past
    the copied ``c``, or ``None`` when ``c`` was not among them.
    """
    _check_length(n, dest, src)
    chunk = bytes(src[:n])
    found = chunk.find(c & 0xFF)
    if found == -1:
        dest[:n] = chunk
        return None
    dest[: found + 1] = chunk[: found + 1]
    return found + 1


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, buffer)
    if src + n > len(buffer) or dest + n > len(buffer):
        raise ValueError("region runs past the end of the buffer")
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_length(n, data)
    found = bytes(data[:n]).find(c & 0xFF)
    return None if found == -1 else found


def memrchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Search backwards for byte ``c``, starting at the string terminator.

    The search begins at the first zero byte (or at the end of ``data``,
    which counts as a terminator) and examines up to ``n`` positions
    towards the start. Returns the index found, or ``None``.
    """
    if n < 0:
        raise ValueError("length must not be negative")
    raw = bytes(data)
    target = c & 0xFF
    end = raw.find(0)
    if end == -1:
        end = len(raw)
    for index in range(end, max(end - n, -1), -1):
        byte = raw[index] if index < len(raw) else 0
        if byte == target:
            return index
    return None


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Difference of the first unequal bytes among the first ``n``, else 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0