import math
import pytest
from farbe.conversions.to_rgb import hsl_to_unit_rgb
from farbe.samples.colors import SAMPLES_RGBA_HSLA


def _close(a, b, tol=1e-9):
    return all(abs(x - y) < tol for x, y in zip(a, b))


@pytest.mark.parametrize("sextant, expected", [
    (0, (1.0, 0.0, 0.0)),
    (1, (1.0, 1.0, 0.0)),
    (2, (0.0, 1.0, 0.0)),
    (3, (0.0, 1.0, 1.0)),
    (4, (0.0, 0.0, 1.0)),
    (5, (1.0, 0.0, 1.0)),
])
def test_sextant_boundaries(sextant, expected):
    assert _close(hsl_to_unit_rgb(sextant / 6, 1.0, 0.5), expected)


def test_mid_sextant_orange():
    r, g, b = hsl_to_unit_rgb(30 / 360, 1.0, 0.5)
    assert _close((r, g, b), (1.0, 0.5, 0.0))


def test_samples_invert():
    for (r, g, b, _), (h, s, l) in SAMPLES_RGBA_HSLA.items():
        out = hsl_to_unit_rgb(h, s, l)
        assert _close(out, (r / 255, g / 255, b / 255), tol=1 / 255)


def test_hue_wraps_around():
    assert _close(hsl_to_unit_rgb(1.0, 1.0, 0.5), hsl_to_unit_rgb(0.0, 1.0, 0.5))
    assert _close(hsl_to_unit_rgb(-1 / 6, 1.0, 0.5), (1.0, 0.0, 1.0))
    assert _close(hsl_to_unit_rgb(1.5, 1.0, 0.5), hsl_to_unit_rgb(0.5, 1.0, 0.5))


def test_lightness_extremes():
    assert _close(hsl_to_unit_rgb(0.3, 1.0, 0.0), (0.0, 0.0, 0.0))
    assert _close(hsl_to_unit_rgb(0.3, 1.0, 1.0), (1.0, 1.0, 1.0))


def test_out_of_range_saturation_is_not_clamped():
    r, g, b = hsl_to_unit_rgb(0.0, 2.0, 0.5)
    assert r == pytest.approx(1.5)
    assert g == pytest.approx(-0.5)
    assert b == pytest.approx(-0.5)


def test_non_finite_hue_is_achromatic():
    assert hsl_to_unit_rgb(math.inf, 1.0, 0.25) == (0.25, 0.25, 0.25)
    assert hsl_to_unit_rgb(math.nan, 0.5, 0.75) == (0.75, 0.75, 0.75)
