from __future__ import annotations
from ..conversions.numbers import byte_to_unit, unit_to_byte
from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_rgb import hsl_to_unit_rgb
from .rgba import RGBA
from .hsla import HSLA


def rgba_to_hsla(self: RGBA) -> HSLA:
    """
    Convert an RGBA color to HSLA.

    Bytes are normalized to [0, 1] before the RGB -> HSL transform and alpha
    becomes ``a / 255``. For grays (r == g == b) saturation is 0 and the hue
    carries no information.
    """
    r, g, b, a = (byte_to_unit(c) for c in self.value)
    h, s, l = unit_rgb_to_hsl(r, g, b)
    return HSLA(h, s, l, a)


def hsla_to_rgba(h: float, s: float, l: float, a: float = 1.0, *, stacklevel: int = 2) -> RGBA:
    """
    Convert HSLA channels to an RGBA color.

    Each channel is scaled by 255 and rounded to nearest. Out-of-range input
    that lands outside the byte range is clamped with a RuntimeWarning.
    ``stacklevel`` follows ``warnings.warn``: 2 attributes it to the caller.
    """
    r, g, b = hsl_to_unit_rgb(h, s, l)
    level = stacklevel + 1
    return RGBA(
        unit_to_byte(r, level),
        unit_to_byte(g, level),
        unit_to_byte(b, level),
        unit_to_byte(a, level),
    )


def _from_hsla(cls: type[RGBA], h: float, s: float, l: float, a: float = 1.0) -> RGBA:
    return hsla_to_rgba(h, s, l, a, stacklevel=3)


def _to_rgba(self: HSLA) -> RGBA:
    return hsla_to_rgba(*self.value, stacklevel=3)


def _from_rgba(cls: type[HSLA], color: RGBA) -> HSLA:
    if not isinstance(color, RGBA):
        raise TypeError(f"expected RGBA, got {type(color).__name__}")
    return rgba_to_hsla(color)


RGBA.to_hsla = rgba_to_hsla
RGBA.from_hsla = classmethod(_from_hsla)
HSLA.to_rgba = _to_rgba
HSLA.from_rgba = classmethod(_from_rgba)
