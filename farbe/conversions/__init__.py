"""
Farbe Color Space Conversions
=============================

Scalar RGB <-> HSL transforms on unit floats, plus byte scaling helpers.

RGB -> HSL:
    unit_rgb_to_hsl(r, g, b)
        r, g, b in [0, 1] -> (h as a fraction of a turn, s, l)

HSL -> RGB:
    hsl_to_unit_rgb(h, s, l)
        (h, s, l) -> r, g, b in [0, 1]; hue wraps, s and l are not clamped

High-Level API:
    convert(color, from_space, to_space)
        4-tuple converter between "rgba" bytes and "hsla" floats

>>> from farbe.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> unit_rgb_to_hsl(0.0, 0.0, 1.0)
(0.6666666666666666, 1.0, 0.5)
>>> hsl_to_unit_rgb(0.0, 1.0, 0.5)
(1.0, 0.0, 0.0)
"""

from .to_hsl import unit_rgb_to_hsl, normalize_hue
from .to_rgb import hsl_to_unit_rgb
from .numbers import as_byte, as_unit, byte_to_unit, unit_to_byte
from .wrapper import convert

__all__ = [
    'unit_rgb_to_hsl',
    'normalize_hue',
    'hsl_to_unit_rgb',
    'as_byte',
    'as_unit',
    'byte_to_unit',
    'unit_to_byte',
    'convert',
]
