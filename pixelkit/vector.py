"""Three-dimensional vector helpers: length, products, rotations and angles.

Vectors are given as any sequence of three numbers (two for
:func:`length2`). The functions return new :class:`Vec3` values and
never change their arguments.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence


class Vec3(NamedTuple):
    """A point or direction in three dimensions."""

    x: float
    y: float
    z: float


def _vec3(v: Sequence[float]) -> Vec3:
    x, y, z = v
    return Vec3(float(x), float(y), float(z))


def length2(v: Sequence[float]) -> float:
    """Euclidean length of a two-dimensional vector."""
    x, y = v
    return math.hypot(x, y)


def normalize(v: Sequence[float]) -> Vec3:
    """``v`` scaled to unit length.

    The vector is returned unchanged when the sum of its components is
    zero, so a zero vector never causes a division by zero.
    """
    p = _vec3(v)
    if p.x + p.y + p.z == 0:
        return p
    inv = 1.0 / math.sqrt(p.x * p.x + p.y * p.y + p.z * p.z)
    return Vec3(p.x * inv, p.y * inv, p.z * inv)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two vectors."""
    p, q = _vec3(a), _vec3(b)
    return p.x * q.x + p.y * q.y + p.z * q.z


def cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Cross product ``a x b``."""
    p, q = _vec3(a), _vec3(b)
    return Vec3(
        p.y * q.z - p.z * q.y,
        p.z * q.x - p.x * q.z,
        p.x * q.y - p.y * q.x,
    )


def deg_to_rad(d: float) -> float:
    """Degrees to radians."""
    return d / 180.0 * math.pi


def rad_to_deg(r: float) -> float:
    """Radians to degrees."""
    return r / math.pi * 180.0


def rotate_x(p: Sequence[float], angle: float) -> Vec3:
    """Rotate ``p`` about the x axis by ``angle`` radians."""
    v = _vec3(p)
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x, v.y * c + v.z * s, -v.y * s + v.z * c)


def rotate_y(p: Sequence[float], angle: float) -> Vec3:
    """Rotate ``p`` about the y axis by ``angle`` radians."""
    v = _vec3(p)
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x * c - v.z * s, v.y, v.x * s + v.z * c)


def rotate_z(p: Sequence[float], angle: float) -> Vec3:
    """Rotate ``p`` about the z axis by ``angle`` radians."""
    v = _vec3(p)
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x * c + v.y * s, -v.x * s + v.y * c, v.z)


def scale(p: Sequence[float], factor: float) -> Vec3:
    """Multiply every component of ``p`` by ``factor``."""
    v = _vec3(p)
    return Vec3(v.x * factor, v.y * factor, v.z * factor)


def spherical_theta(v: Sequence[float]) -> float:
    """Polar angle of a unit vector, from its z component.

    Raises ``ValueError`` when the z component lies outside ``[-1, 1]``.
    """
    return math.acos(_vec3(v).z)


def spherical_phi(v: Sequence[float]) -> float:
    """Azimuth of ``v`` in the xy plane, in ``[0, 2*pi)``."""
    p = _vec3(v)
    angle = math.atan2(p.y, p.x)
    return angle + 2 * math.pi if angle < 0 else angle


def to_spherical(v: Sequence[float]) -> Vec3:
    """Unit direction built from the spherical angles of ``v``."""
    theta = spherical_theta(v)
    phi = spherical_phi(v)
    return Vec3(
        math.cos(phi) * math.cos(theta),
        math.cos(phi) * math.sin(theta),
        math.sin(phi),
    )


def spherical_perspective(v: Sequence[float], p: Sequence[float]) -> Vec3:
    """Project ``p`` on ``v``: every component is the dot product of the two."""
    d = dot(v, p)
    return Vec3(d, d, d)