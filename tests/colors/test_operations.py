import pytest
import farbe
from farbe.colors import operations as ops
from farbe.colors import RGBA, HSLA


def test_flat_rgba_functions():
    red = ops.rgba_from_components(255, 0, 0, 255)
    blue = ops.rgba_from_hex(0x0000FFFF)

    assert red.value == (255, 0, 0, 255)
    assert blue.value == (0, 0, 255, 255)
    assert ops.rgba_blend(red, blue).value == (127, 0, 127, 255)
    assert ops.rgba_to_u32(red) == 0xFF0000FF

    red_hsla = ops.rgba_to_hsla(red)
    assert abs(red_hsla.s - 1.0) < 0.01
    assert ops.rgba_from_hsla(red_hsla.h, red_hsla.s, red_hsla.l, red_hsla.a) == red


def test_flat_hsla_functions():
    blue = ops.hsla_create(240 / 360, 1.0, 0.5, 1.0)
    gray = ops.hsla_grayscale(blue)
    faded = ops.hsla_opacity(blue, 0.5)

    assert abs(gray.s) < 0.01
    assert abs(faded.a - 0.5) < 0.01
    assert blue.a == 1.0

    blended = ops.hsla_blend(blue, faded)
    assert abs(blended.a - 0.75) < 1e-6

    from_rgba = ops.hsla_from_rgba(RGBA(0, 0, 255, 255))
    assert abs(from_rgba.h - 240 / 360) < 1e-6


def test_flat_fade_out_mutates_argument():
    blue = ops.hsla_create(240 / 360, 1.0, 0.5)
    assert ops.hsla_fade_out(blue, 0.5) is None
    assert blue.a == 0.5
    assert blue.s == 1.0


def test_factories():
    assert farbe.rgb(255, 0, 0) == RGBA(255, 0, 0, 255)
    assert farbe.rgba(0, 255, 0).a == 255
    assert farbe.rgba(0, 255, 0, 10).a == 10
    assert farbe.from_hex(0x0000FFFF).b == 255
    assert farbe.hsla(0.5, 0.5, 0.5) == HSLA(0.5, 0.5, 0.5, 1.0)


def test_blend_then_convert_purple():
    purple = farbe.rgb(255, 0, 0).blend(farbe.from_hex(0x0000FFFF))
    hsla = purple.to_hsla()
    assert abs(hsla.h - 300 / 360) < 1e-6
    assert abs(hsla.s - 1.0) < 1e-6


def test_flat_conversion_warning_points_at_the_caller():
    with pytest.warns(RuntimeWarning) as record:
        ops.rgba_from_hsla(0.0, 2.0, 0.5, 1.0)
    assert all(w.filename == __file__ for w in record)

    with pytest.warns(RuntimeWarning) as record:
        farbe.hsla_to_rgba(0.0, 2.0, 0.5, 1.0)
    assert all(w.filename == __file__ for w in record)
