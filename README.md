# pixelkit

A small toolkit for simple graphics programs, with no dependencies outside
the standard library. It covers:

- character, string and byte-buffer utilities
- colour conversion and interpolation
- 3D vector and quaternion maths
- camera descriptions and key-code tables
- raw-texture loading, in-memory images and animated sprites
- Bresenham line drawing

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `pixelkit.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`. Each takes an int code point or a one-character string. |
| `pixelkit.numbers` | `atoi` (C-style parsing, wraps to 32 bits), `itoa`, `number_length`, `power`, `int_sqrt` |
| `pixelkit.output` | `put_char`, `put_str`, `put_endl`, `put_nbr`, `print_bits`, `print_words`. They write to an optional text stream, which defaults to `sys.stdout`. |
| `pixelkit.memory` | `memset`, `bzero`, `memcpy`, `memccpy`, `memmove`, `memchr`, `memrchr`, `memcmp` on `bytearray` and bytes-like objects. They raise `ValueError` when a length exceeds a buffer. |
| `pixelkit.search` | `find_char`, `rfind_char`, `find_sub`, `find_sub_n`, `compare`, `compare_n`, `equal`, `equal_n`. Searches return an index or `None`. |
| `pixelkit.text` | `substring`, `concat`, `trim`, `split`, `map_chars`, `map_chars_indexed`, `reverse`, `copy_n`, `concat_n`, `bounded_concat` (returns a `ConcatResult` of `text` and `length`) |
| `pixelkit.lines` | `LineReader`, which splits the data of any object with `read(size)` into lines, `str` or `bytes` |
| `pixelkit.linked` | `Node` (iterable from itself onwards), `push`, `map_nodes`, `delete_all` |
| `pixelkit.color` | `Color`, `HSL`, `lerp_color`, `lerp_int_colors`, `rgb_to_hsl`, `hsl_to_rgb`, `float_min`, `float_max` |
| `pixelkit.vector` | `Vec3`, `length2`, `normalize`, `dot`, `cross`, `deg_to_rad`, `rad_to_deg`, `rotate_x`, `rotate_y`, `rotate_z`, `scale`, `spherical_theta`, `spherical_phi`, `to_spherical`, `spherical_perspective` |
| `pixelkit.quaternion` | `Quaternion`, an immutable value with `norm()` (rounded down), unary `-`, `add_real`, `+` and the Hamilton product `*` |
| `pixelkit.camera` | `Camera2D` (with a `half_fov` property), and `Camera3D` with `Camera3D.look_at(origin, target)` |
| `pixelkit.keymap` | `LinuxKey` and `MacKey` enums of key codes, and `keymap(platform)`, which picks one and raises `ValueError` for other platforms |
| `pixelkit.texture` | `Texture`, `Image`, `Sprite`, `SpriteMode`, `TextureError`, `frame_pixels`, and the constants `TRANSPARENT` and `ANIM_SPEED` |
| `pixelkit.trace` | `Trace`, a Bresenham line drawer with a colour gradient, which draws onto an `Image` |

## Examples

### Colours

```python
from pixelkit.color import Color, lerp_int_colors, hsl_to_rgb, rgb_to_hsl

mid = lerp_int_colors(0x000000, 0xFF0000, 0.5)   # 0x7F0000
c = Color.from_int(0x336699)
print(c.r, c.g, c.b)
print(rgb_to_hsl(255, 0, 0))                     # HSL(hue=0.0, saturation=1.0, lightness=0.5)
print(hex(hsl_to_rgb(120.0, 1.0, 0.5)))
```

### Vectors and cameras

```python
from pixelkit.vector import cross, rotate_z
from pixelkit.camera import Camera3D

print(cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)))   # Vec3(x=0.0, y=0.0, z=1.0)
cam = Camera3D.look_at((0.0, 0.0, 5.0), (0.0, 0.0, 0.0))
print(cam.forward)                               # points from the target to the camera
```

### Textures, images and sprites

```python
from pixelkit.texture import Texture, Image, Sprite, SpriteMode

tex = Texture.blank(4, 4, nframes=2)
img = Image(16, 16)
img.blit(tex, 2, 2, frame=0)     # False when the texture lies wholly off the image
bigger = tex.scaled_by(2.0)      # nearest-neighbour resize, 8x8

sprite = Sprite(tex, mode=SpriteMode.ANIMATED, cooldown=10, position=(0, 0))
sprite.draw(img)                 # advances the animation one step, then draws
sprite.trigger()                 # starts playing frames once the cooldown has passed
```

Pixels equal to `TRANSPARENT` (`0x980088`) are skipped when drawing. An
`Image` keeps its pixels in the `data` list, row by row.

`Texture.load(path, width, height, nframes)` reads a raw texture file. The
file holds a little-endian header of three 32-bit values: the pixel count,
the width, and the height of all frames stacked. The 32-bit pixels follow,
with nothing after them. A file that is missing, unreadable or does not
match the requested size raises `TextureError`.

### Lines

```python
from pixelkit.texture import Image
from pixelkit.trace import Trace

img = Image(64, 64)
trace = Trace.from_points((-10, -10), (10, 5), depth=(0.0, 1.0, 0.0))
trace.animate(0x0000FF, 0xFF0000, width=64, height=64)
trace.draw(img)
```

Points are relative to the centre of the drawing area. Pixels that fall
outside the area are not drawn.

### Reading lines

```python
import io
from pixelkit.lines import LineReader

for line in LineReader(io.BytesIO(b"one\ntwo\n"), 100):
    print(line)
```

## What it does not do

pixelkit does not open windows, show images on screen or read keyboard and
mouse events. `Image` is only a list of pixels in memory, and `keymap` only
provides tables of key codes. Showing the pixels and handling input is up to
whatever display library the program uses.