"""
Flat function API.

Free-function view of the color types: one function per operation, for callers
that prefer functions over methods. All of them are pure except ``hsla_fade_out``.
"""
from __future__ import annotations
from .rgba import RGBA
from .hsla import HSLA
from .color import hsla_to_rgba, rgba_to_hsla

__all__ = [
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
]


def rgba_from_components(r: int, g: int, b: int, a: int) -> RGBA:
    return RGBA.from_components(r, g, b, a)


def rgba_from_hex(hex: int) -> RGBA:
    return RGBA.from_hex(hex)


def rgba_from_hsla(h: float, s: float, l: float, a: float) -> RGBA:
    return hsla_to_rgba(h, s, l, a, stacklevel=3)


def rgba_blend(a: RGBA, b: RGBA) -> RGBA:
    return a.blend(b)


def rgba_to_u32(color: RGBA) -> int:
    return color.to_u32()


def hsla_create(h: float, s: float, l: float, a: float = 1.0) -> HSLA:
    return HSLA.create(h, s, l, a)


def hsla_from_rgba(color: RGBA) -> HSLA:
    return HSLA.from_rgba(color)


def hsla_blend(a: HSLA, b: HSLA) -> HSLA:
    return a.blend(b)


def hsla_grayscale(color: HSLA) -> HSLA:
    return color.grayscale()


def hsla_opacity(color: HSLA, factor: float) -> HSLA:
    return color.opacity(factor)


def hsla_fade_out(color: HSLA, factor: float) -> None:
    """Multiply the alpha of ``color`` by ``factor`` in place."""
    color.fade_out(factor)
