"""Farbe: RGBA and HSLA color values with conversions and blending."""

from .colors.rgba import RGBA
from .colors.hsla import HSLA
from .colors.color_base import ColorBase
from .colors.color import rgba_to_hsla, hsla_to_rgba
from .colors.operations import (
    rgba_from_components,
    rgba_from_hex,
    rgba_from_hsla,
    rgba_blend,
    rgba_to_u32,
    hsla_create,
    hsla_from_rgba,
    hsla_blend,
    hsla_grayscale,
    hsla_opacity,
    hsla_fade_out,
)
from .conversions import (
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    convert,
)
from .types.format_type import RGBA_DTYPE, HSLA_DTYPE


def rgb(r: int, g: int, b: int) -> RGBA:
    """Opaque color from three bytes."""
    return RGBA(r, g, b, 255)


def rgba(r: int, g: int, b: int, a: int = 255) -> RGBA:
    return RGBA(r, g, b, a)


def from_hex(hex: int) -> RGBA:
    """Color from a packed ``0xRRGGBBAA`` integer."""
    return RGBA.from_hex(hex)


def hsla(h: float, s: float, l: float, a: float = 1.0) -> HSLA:
    return HSLA(h, s, l, a)


__version__ = "0.1.0"

__all__ = [
    # value types
    "ColorBase",
    "RGBA",
    "HSLA",
    "RGBA_DTYPE",
    "HSLA_DTYPE",
    # factories
    "rgb",
    "rgba",
    "from_hex",
    "hsla",
    # flat function API
    "rgba_from_components",
    "rgba_from_hex",
    "rgba_from_hsla",
    "rgba_blend",
    "rgba_to_hsla",
    "rgba_to_u32",
    "hsla_create",
    "hsla_from_rgba",
    "hsla_blend",
    "hsla_grayscale",
    "hsla_opacity",
    "hsla_fade_out",
    "hsla_to_rgba",
    # conversions
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "convert",
]
