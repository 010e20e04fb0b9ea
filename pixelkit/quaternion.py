"""Quaternions with ``x`` as the real part and ``y``, ``z``, ``w`` as i, j, k."""

from __future__ import annotations

from dataclasses import dataclass

from pixelkit.numbers import int_sqrt


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion ``x + y*i + z*j + w*k``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def norm(self) -> float:
        """Euclidean norm rounded down to a whole number."""
        total = self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        return float(int_sqrt(int(total)))

    def __neg__(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def add_real(self, r: float) -> "Quaternion":
        """This quaternion with ``r`` added to its real part."""
        return Quaternion(self.x + r, self.y, self.z, self.w)

    def __add__(self, other: object) -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __mul__(self, other: object) -> "Quaternion":
        """Hamilton product ``self * other``."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.x * b.x - a.y * b.y - a.z * b.z - a.w * b.w,
            a.x * b.y + a.y * b.x + a.z * b.w - a.w * b.z,
            a.x * b.z - a.y * b.w + a.z * b.x + a.w * b.y,
            a.x * b.w + a.y * b.z - a.z * b.y + a.w * b.x,
        )