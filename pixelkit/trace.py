"""Drawing lines with Bresenham's algorithm and a moving colour gradient."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Sequence, Tuple

from pixelkit.color import Color, lerp_color, lerp_int_colors
from pixelkit.texture import Image
from pixelkit.vector import length2


@dataclass
class Trace:
    """A line from ``start`` to ``end`` on a centred drawing area.

    Points are whole-pixel coordinates relative to the centre of a
    ``width`` x ``height`` area. ``depth`` gives, in its first two values,
    how far along the colour ramp each end's shade lies.
    """

    start: Tuple[int, int]
    end: Tuple[int, int]
    depth: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    step: Tuple[int, int] = (0, 0)
    direction: Tuple[int, int] = (1, 1)
    total: float = 0.0
    near_color: Color = field(default_factory=Color)
    far_color: Color = field(default_factory=Color)
    width: int = 0
    height: int = 0
    scale: float = 0.0
    phase: float = 0.0
    translation: Tuple[float, float] = (0.0, 0.0)

    @classmethod
    def from_points(
        cls,
        start: Sequence[float],
        end: Sequence[float],
        depth: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> "Trace":
        """A trace between two points, truncated to whole pixels."""
        x1, y1 = int(start[0]), int(start[1])
        x2, y2 = int(end[0]), int(end[1])
        dz = tuple(float(v) for v in depth)
        if len(dz) != 3:
            raise ValueError("depth must have three components")
        return cls(
            start=(x1, y1),
            end=(x2, y2),
            depth=dz,  # type: ignore[arg-type]
            step=(abs(x2 - x1), abs(y2 - y1)),
            direction=(1 if x1 < x2 else -1, 1 if y1 < y2 else -1),
        )

    def animate(
        self,
        start_color: int,
        end_color: int,
        width: int,
        height: int,
        scale: float = 0.0,
        phase: float = 0.0,
        translation: Tuple[float, float] = (0.0, 0.0),
    ) -> None:
        """Set the colours, drawing area and placement of the trace."""
        near, far = self.depth[0], self.depth[1]
        self.near_color = Color.from_int(
            lerp_int_colors(start_color, end_color, near) if near != 0.0 else start_color
        )
        self.far_color = Color.from_int(
            lerp_int_colors(start_color, end_color, far) if far != 0.0 else start_color
        )
        self.total = self._remaining()
        self.width = width
        self.height = height
        self.scale = scale
        self.phase = phase
        self.translation = (float(translation[0]), float(translation[1]))

    def _remaining(self) -> float:
        return length2((self.end[0] - self.start[0], self.end[1] - self.start[1]))

    def plot(self, image: Image) -> bool:
        """Colour the pixel at the current start point; False when it is off the area."""
        shift_y, shift_x = self.translation
        x = int(self.start[0] + (self.width // 2 + shift_x))
        y = int(self.start[1] + ((self.height // 2 - int(self.scale)) + shift_y))
        if not (0 <= x <= self.width and 0 <= y <= self.height):
            return False
        index = x + y * self.width
        if index < 0 or index >= self.width * self.height or index >= len(image.data):
            return False
        ratio = self._remaining() / self.total if self.total else 0.0
        fraction = math.fmod(ratio + self.phase, 1.0)
        image.data[index] = lerp_color(self.far_color, self.near_color, fraction)
        return True

    def draw(self, image: Image) -> None:
        """Draw the whole line onto ``image``; the trace itself is unchanged."""
        cursor = replace(self)
        dx, dy = self.step
        sx, sy = self.direction
        err = int((dx if dx > dy else -dy) / 2)
        while True:
            cursor.plot(image)
            if cursor.start == cursor.end:
                return
            previous = err
            x, y = cursor.start
            if previous > -dx:
                err -= dy
                x += sx
            if previous < dy:
                err += dx
                y += sy
            cursor.start = (x, y)