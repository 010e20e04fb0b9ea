"""Simple two- and three-dimensional camera descriptions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from pixelkit.vector import Vec3, cross, normalize

_WORLD_UP = (0.0, 1.0, 0.0)


@dataclass
class Camera2D:
    """A camera for a top-down ray caster."""

    fov: float = 3.1415927 / 3
    speed_move: float = 100.0
    speed_angle: float = 100.0
    dir: Tuple[float, float] = (0.0, 0.0)

    @property
    def half_fov(self) -> float:
        """Half of the field of view."""
        return self.fov / 2.0


@dataclass
class Camera3D:
    """An orthonormal camera frame placed at ``origin``."""

    right: Vec3
    up: Vec3
    forward: Vec3
    origin: Vec3
    fov: float = math.pi / 3

    @classmethod
    def look_at(cls, origin: Sequence[float], target: Sequence[float]) -> "Camera3D":
        """Camera at ``origin`` looking towards ``target``, with world up along y.

        ``forward`` points from the target back to the camera. When the
        view is parallel to the world up axis the right vector would have
        no x component; its x is then forced to 1.
        """
        ox, oy, oz = origin
        tx, ty, tz = target
        forward = normalize((ox - tx, oy - ty, oz - tz))
        right = cross(normalize(_WORLD_UP), forward)
        if right.x == 0.0:
            right = right._replace(x=1.0)
        up = cross(forward, right)
        return cls(
            right=right,
            up=up,
            forward=forward,
            origin=Vec3(float(ox), float(oy), float(oz)),
        )