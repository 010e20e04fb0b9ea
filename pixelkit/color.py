"""Packed RGB colours, linear interpolation and HSL conversion.

A packed colour holds red in bits 16-23, green in bits 8-15 and blue in
bits 0-7. HSL values use degrees for hue and fractions in ``[0, 1]`` for
saturation and lightness.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence

_MASK = 0xFF


def _pack(r: int, g: int, b: int) -> int:
    return ((r & _MASK) << 16) | ((g & _MASK) << 8) | (b & _MASK)


@dataclass(frozen=True)
class Color:
    """A colour split into channels, with the packed value it came from."""

    r: int = 0
    g: int = 0
    b: int = 0
    color: int = 0

    @classmethod
    def from_int(cls, value: int) -> "Color":
        """Split a packed colour into its channels."""
        return cls(
            r=(value >> 16) & _MASK,
            g=(value >> 8) & _MASK,
            b=value & _MASK,
            color=value,
        )


class HSL(NamedTuple):
    """Hue in degrees, saturation and lightness as fractions."""

    hue: float
    saturation: float
    lightness: float


def lerp_color(start: Color, end: Color, t: float) -> int:
    """Packed colour a fraction ``t`` of the way from ``start`` to ``end``.

    Channels are truncated towards zero. When both colours have the same
    packed value that value is returned unchanged.
    """
    if start.color == end.color:
        return start.color
    r = int(start.r + (end.r - start.r) * t)
    g = int(start.g + (end.g - start.g) * t)
    b = int(start.b + (end.b - start.b) * t)
    return _pack(r, g, b)


def lerp_int_colors(a: int, b: int, t: float) -> int:
    """:func:`lerp_color` on two packed colours."""
    return lerp_color(Color.from_int(a), Color.from_int(b), t)


def _first_three(values: Sequence[float]) -> Sequence[float]:
    head = list(values)[:3]
    if len(head) < 3:
        raise ValueError("expected at least three values")
    return head


def float_min(values: Sequence[float]) -> float:
    """Smallest of the first three values."""
    return min(_first_three(values))


def float_max(values: Sequence[float]) -> float:
    """Largest of the first three values."""
    return max(_first_three(values))


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert 0-255 channel values to hue, saturation and lightness.

    Greys have a hue and saturation of zero.
    """
    red, green, blue = r / 255.0, g / 255.0, b / 255.0
    channels = (red, green, blue)
    low = float_min(channels)
    high = float_max(channels)
    lightness = (low + high) / 2.0
    if low == high:
        return HSL(0.0, 0.0, lightness)
    spread = high - low
    if lightness < 0.5:
        saturation = spread / (high + low)
    else:
        saturation = spread / (2.0 - high - low)
    if high == red:
        hue = ((green - blue) / spread) * 60.0
    elif high == green:
        hue = (2.0 + (blue - red) / spread) * 60.0
    else:
        hue = (4.0 + (red - green) / spread) * 60.0
    if hue < 0:
        hue += 360.0
    return HSL(hue, saturation, lightness)


def _wrap_unit(n: float) -> float:
    if n > 1:
        n -= 1
    if n < 0:
        n += 1
    return n


def _channel(position: float, high: float, low: float) -> float:
    if 6.0 * position < 1.0:
        return low + (high - low) * 6.0 * position
    if 2.0 * position < 1.0:
        return high
    if 3.0 * position < 2.0:
        return low + (high - low) * (0.666 - position) * 6.0
    return low


def _to_byte(value: float) -> int:
    return int((value + 0.005) * 255.0)


def hsl_to_rgb(hue: float, sat: float, lum: float) -> int:
    """Convert hue, saturation and lightness to a packed colour.

    Each channel is biased up by 0.005 before scaling and keeps only its
    low eight bits. When hue and saturation are both zero the result is
    three times the grey level scaled to 0-255, not a packed colour.
    """
    if hue == 0 and sat == 0:
        return int(lum * 255.0) * 3
    if lum < 0.5:
        high = lum * (1.0 + sat)
    else:
        high = lum + sat - lum * sat
    low = 2 * lum - high
    position = hue / 360.0
    red = _to_byte(_channel(_wrap_unit(position + 0.333), high, low))
    green = _to_byte(_channel(_wrap_unit(position), high, low))
    blue = _to_byte(_channel(_wrap_unit(position - 0.333), high, low))
    return _pack(red, green, blue)