import pytest

from pixelkit.color import (
    Color,
    float_max,
    float_min,
    hsl_to_rgb,
    lerp_color,
    lerp_int_colors,
    rgb_to_hsl,
)


def test_from_int_splits_channels():
    c = Color.from_int(0x123456)
    assert (c.r, c.g, c.b, c.color) == (0x12, 0x34, 0x56, 0x123456)


def test_from_int_ignores_high_bits_in_channels():
    c = Color.from_int(0x7F00FF00)
    assert (c.r, c.g, c.b) == (0x00, 0xFF, 0x00)
    assert c.color == 0x7F00FF00


def test_lerp_endpoints():
    start, end = Color.from_int(0x102030), Color.from_int(0xA0B0C0)
    assert lerp_color(start, end, 0.0) == 0x102030
    assert lerp_color(start, end, 1.0) == 0xA0B0C0


def test_lerp_same_colour_returned_unchanged():
    value = 0x7F123456
    assert lerp_int_colors(value, value, 0.3) == value


def test_lerp_channels_monotonic():
    reds = [lerp_int_colors(0x000000, 0xFF0000, t / 10) >> 16 for t in range(11)]
    assert reds == sorted(reds)
    assert reds[0] == 0 and reds[-1] == 0xFF


def test_lerp_int_matches_lerp_color():
    a, b = 0x336699, 0xCC9933
    assert lerp_int_colors(a, b, 0.25) == lerp_color(
        Color.from_int(a), Color.from_int(b), 0.25
    )


def test_float_min_max_first_three():
    values = [3.0, -1.0, 2.0, -50.0]
    assert float_min(values) == -1.0
    assert float_max(values) == 3.0


def test_float_min_requires_three():
    with pytest.raises(ValueError):
        float_min([1.0, 2.0])
    with pytest.raises(ValueError):
        float_max([])


@pytest.mark.parametrize(
    "rgb, hue",
    [((255, 0, 0), 0.0), ((0, 255, 0), 120.0), ((0, 0, 255), 240.0), ((255, 0, 255), 300.0)],
)
def test_primary_hues(rgb, hue):
    result = rgb_to_hsl(*rgb)
    assert result.hue == pytest.approx(hue)
    assert result.saturation == pytest.approx(1.0)
    assert result.lightness == pytest.approx(0.5)


def test_grey_has_no_hue_or_saturation():
    result = rgb_to_hsl(128, 128, 128)
    assert result.hue == 0.0
    assert result.saturation == 0.0
    assert result.lightness == pytest.approx(128 / 255)


@pytest.mark.parametrize("rgb", [(10, 200, 30), (250, 100, 5), (40, 40, 90), (1, 2, 3)])
def test_hsl_invariants(rgb):
    result = rgb_to_hsl(*rgb)
    lo, hi = min(rgb) / 255, max(rgb) / 255
    assert result.lightness == pytest.approx((lo + hi) / 2)
    assert 0.0 <= result.hue < 360.0
    assert 0.0 <= result.saturation <= 1.0


def test_hsl_to_rgb_hue_and_saturation_zero():
    assert hsl_to_rgb(0, 0, 0.0) == 0
    assert hsl_to_rgb(0, 0, 1.0) == 255 * 3


@pytest.mark.parametrize("hue", [30.0, 120.0, 200.0, 330.0])
@pytest.mark.parametrize("lum", [0.1, 0.4, 0.8])
def test_unsaturated_colours_are_grey(hue, lum):
    value = hsl_to_rgb(hue, 0.0, lum)
    r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    assert r == g == b


@pytest.mark.parametrize("hue", [10.0, 90.0, 180.0, 270.0])
def test_hsl_to_rgb_fits_in_24_bits(hue):
    value = hsl_to_rgb(hue, 0.6, 0.3)
    assert 0 <= value <= 0xFFFFFF


def test_brighter_grey_is_larger():
    assert hsl_to_rgb(60.0, 0.0, 0.2) < hsl_to_rgb(60.0, 0.0, 0.7)