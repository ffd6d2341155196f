import math

import pytest

from spaceman.node_color import (
    HSL,
    RGBA,
    darken,
    depth_dir_color,
    depth_file_color,
)

DIR_BASE = (0xB6 / 256.0, 0xD4 / 256.0, 0xF2 / 256.0)
FILE_BASE = (0xF4 / 256.0, 0xB9 / 256.0, 0xD1 / 256.0)


@pytest.mark.parametrize(
    "color",
    [
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
        (0.2, 0.6, 0.4),
        (0.9, 0.3, 0.7),
        (0.5, 0.45, 0.1),
        DIR_BASE,
        FILE_BASE,
    ],
)
def test_hsl_round_trip(color):
    result = tuple(HSL.from_rgb(color).to_rgb())
    assert result == pytest.approx(color, abs=1e-9)


def test_hsl_ranges():
    hsl = HSL.from_rgb(FILE_BASE)
    assert 0.0 <= hsl.hue <= 2 * math.pi
    assert 0.0 <= hsl.saturation <= 1.0
    assert 0.0 <= hsl.lightness <= 1.0


def test_pure_red_hsl():
    hsl = HSL.from_rgb((1.0, 0.0, 0.0))
    assert math.isclose(hsl.hue, 0.0, abs_tol=1e-12)
    assert math.isclose(hsl.saturation, 1.0)
    assert math.isclose(hsl.lightness, 0.5)


def test_achromatic_colour_raises():
    with pytest.raises(ValueError):
        HSL.from_rgb((0.5, 0.5, 0.5))


def test_hue_out_of_range_raises():
    with pytest.raises(ValueError):
        HSL(hue=7.0, saturation=0.5, lightness=0.5).to_rgb()


def test_darken_by_one_is_identity():
    result = tuple(darken(1.0, DIR_BASE))
    assert result == pytest.approx(DIR_BASE, abs=1e-9)


def test_darken_lowers_lightness():
    base = HSL.from_rgb(DIR_BASE)
    darker = HSL.from_rgb(darken(0.8, DIR_BASE))
    assert darker.lightness < base.lightness
    assert math.isclose(darker.hue, base.hue, abs_tol=1e-9)


def test_depth_zero_is_base_colour():
    dir_color = depth_dir_color(0)
    file_color = depth_file_color(0)
    assert (dir_color.red, dir_color.green, dir_color.blue) == pytest.approx(
        DIR_BASE, abs=1e-9
    )
    assert (file_color.red, file_color.green, file_color.blue) == pytest.approx(
        FILE_BASE, abs=1e-9
    )
    assert dir_color.alpha == 1.0


def test_colours_repeat_every_five_levels():
    for depth in range(5):
        assert depth_dir_color(depth) == depth_dir_color(depth + 5)
        assert depth_file_color(depth) == depth_file_color(depth + 10)


def test_colours_darken_with_depth():
    lightness = [
        HSL.from_rgb((c.red, c.green, c.blue)).lightness
        for c in (depth_dir_color(d) for d in range(5))
    ]
    assert lightness == sorted(lightness, reverse=True)
    assert len(set(lightness)) == 5


def test_rgba_default_alpha():
    assert RGBA(0.1, 0.2, 0.3).alpha == 1.0