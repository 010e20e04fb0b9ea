"""Pixel textures, drawable images and animated sprites.

Pixels are packed 0xRRGGBB integers stored row by row. A texture holds one
or more frames of the same size. Pixels equal to :data:`TRANSPARENT` are
skipped when a texture is drawn onto an image.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntFlag
from pathlib import Path
from typing import List, Sequence, Tuple, Union

TRANSPARENT = 0x980088
ANIM_SPEED = 15

_HEADER = struct.Struct("<Iii")

PathLike = Union[str, Path]


class TextureError(Exception):
    """A texture could not be created, loaded or scaled."""


class SpriteMode(IntFlag):
    """Behaviour flags of a sprite."""

    NONE = 0
    ANIMATED = 1
    IN_COOLDOWN = 2


def _check_size(width: int, height: int, nframes: int) -> None:
    if width <= 0 or height <= 0 or nframes <= 0:
        raise TextureError(
            f"invalid texture size {width}x{height} with {nframes} frame(s)"
        )


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _sample_positions(source: int, target: int) -> List[int]:
    gap = source / target
    positions = []
    position = 0.0
    for _ in range(target):
        positions.append(min(int(position), source - 1))
        position += gap
    return positions


@dataclass
class Texture:
    """One or more frames of ``width`` x ``height`` pixels."""

    width: int
    height: int
    frames: List[List[int]]

    @property
    def nframes(self) -> int:
        """Number of frames."""
        return len(self.frames)

    @classmethod
    def blank(cls, width: int, height: int, nframes: int = 1) -> "Texture":
        """A texture whose frames are all black."""
        _check_size(width, height, nframes)
        return cls(width, height, [[0] * (width * height) for _ in range(nframes)])

    @classmethod
    def load(
        cls, path: PathLike, width: int, height: int, nframes: int = 1
    ) -> "Texture":
        """Read a texture file of the expected size.

        The file holds a little-endian header of three 32-bit values (the
        pixel count, the width, and the height of all frames stacked), then
        exactly that many 32-bit pixels and nothing after them.
        """
        _check_size(width, height, nframes)
        try:
            raw = Path(path).read_bytes()
        except OSError as exc:
            raise TextureError(f"cannot read texture {path}") from exc
        if len(raw) < _HEADER.size:
            raise TextureError(f"texture {path} has no complete header")
        count, file_width, file_height = _HEADER.unpack_from(raw)
        if count != width * height * nframes:
            raise TextureError(
                f"texture {path} holds {count} pixels, "
                f"expected {width * height * nframes}"
            )
        if file_width != width or _truncating_div(file_height, nframes) != height:
            raise TextureError(
                f"texture {path} is {file_width}x{file_height}, "
                f"expected {width}x{height * nframes}"
            )
        body = raw[_HEADER.size:]
        if len(body) != count * 4:
            raise TextureError(f"texture {path} has {len(body)} bytes of pixels, "
                               f"expected {count * 4}")
        pixels = struct.unpack(f"<{count}I", body)
        frame_size = width * height
        frames = [
            list(pixels[index * frame_size:(index + 1) * frame_size])
            for index in range(nframes)
        ]
        return cls(width, height, frames)

    def scaled_to(self, width: int, height: int) -> "Texture":
        """A new texture resized to ``width`` x ``height`` by nearest sampling."""
        _check_size(width, height, self.nframes)
        columns = _sample_positions(self.width, width)
        rows = _sample_positions(self.height, height)
        frames = [
            [frame[row * self.width + column] for row in rows for column in columns]
            for frame in self.frames
        ]
        return Texture(width, height, frames)

    def scaled_by(self, factor: float) -> "Texture":
        """A new texture with both sides multiplied by ``factor``, truncated."""
        return self.scaled_to(int(self.width * factor), int(self.height * factor))


class Image:
    """A drawing surface of packed pixels, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.data: List[int] = [0] * (width * height)

    def clear(self) -> None:
        """Set every pixel to black."""
        self.data[:] = [0] * len(self.data)

    def blit(self, texture: Texture, x: int, y: int, frame: int = 0) -> bool:
        """Draw one frame of ``texture`` with its top-left corner at ``(x, y)``.

        Transparent pixels and pixels falling outside the image are skipped.
        Returns ``False`` when the texture lies wholly off the image.
        """
        if not 0 <= frame < texture.nframes:
            raise IndexError(f"frame {frame} out of range for {texture.nframes}")
        if (
            x > self.width
            or y > self.height
            or x + texture.width < 0
            or y + texture.height < 0
        ):
            return False
        pixels = texture.frames[frame]
        for row in range(texture.height):
            target_y = y + row
            if not 0 <= target_y < self.height:
                continue
            start = row * texture.width
            for column, value in enumerate(pixels[start:start + texture.width]):
                target_x = x + column
                if value != TRANSPARENT and 0 <= target_x < self.width:
                    self.data[target_y * self.width + target_x] = value
        return True


@dataclass
class Sprite:
    """A texture placed on screen, optionally animated.

    An animated sprite shows frame 0 for ``cooldown`` draws, then waits
    until :meth:`trigger` is called. It then plays the remaining frames,
    each for :data:`ANIM_SPEED` draws, and returns to frame 0.
    """

    texture: Texture
    mode: SpriteMode = SpriteMode.NONE
    cooldown: int = 0
    position: Tuple[int, int] = (0, 0)
    frame: int = 0
    ticks: int = field(default=0)

    def _advance(self) -> None:
        if not self.mode & SpriteMode.ANIMATED or self.mode & SpriteMode.IN_COOLDOWN:
            return
        self.ticks += 1
        if self.frame == 0:
            if self.ticks > self.cooldown:
                self.mode |= SpriteMode.IN_COOLDOWN
        elif self.ticks >= ANIM_SPEED:
            self.frame += 1
            self.ticks = 0
        if self.frame >= self.texture.nframes:
            self.frame = 0

    def draw(self, image: Image) -> bool:
        """Advance the animation by one step and draw the current frame."""
        self._advance()
        x, y = self.position
        return image.blit(self.texture, x, y, self.frame)

    def trigger(self) -> None:
        """Start the animation of a sprite waiting on frame 0."""
        if self.mode & SpriteMode.ANIMATED and self.mode & SpriteMode.IN_COOLDOWN:
            self.mode &= ~SpriteMode.IN_COOLDOWN
            self.frame += 1


def frame_pixels(texture: Texture, frame: int = 0) -> Sequence[int]:
    """The pixels of one frame of ``texture``, row by row."""
    return texture.frames[frame]