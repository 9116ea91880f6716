from typing import Callable, Dict, Tuple, cast

from ..types.format_type import COLOR_SPACES, ColorSpace
from ..types.color_types import ByteVector, ColorElement, UnitVector
from .numbers import as_byte, as_unit, byte_to_unit, unit_to_byte
from .to_hsl import unit_rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb


def _rgba_to_hsla(color: ByteVector) -> UnitVector:
    r, g, b, a = (byte_to_unit(as_byte(c)) for c in color)
    h, s, l = unit_rgb_to_hsl(r, g, b)
    return as_unit(h), as_unit(s), as_unit(l), as_unit(a)


def _hsla_to_rgba(color: UnitVector) -> ByteVector:
    h, s, l, a = color
    r, g, b = hsl_to_unit_rgb(h, s, l)
    # 4: unit_to_byte, here, convert, caller
    return (
        unit_to_byte(r, stacklevel=4),
        unit_to_byte(g, stacklevel=4),
        unit_to_byte(b, stacklevel=4),
        unit_to_byte(a, stacklevel=4),
    )


CONVERT: Dict[Tuple[str, str], Callable[..., ColorElement]] = {
    ("rgba", "hsla"): _rgba_to_hsla,
    ("hsla", "rgba"): _hsla_to_rgba,
}


def convert(color: ColorElement, from_space: ColorSpace, to_space: ColorSpace) -> ColorElement:
    """
    Convert a plain 4-tuple between color spaces.

    Args:
        color: ``(r, g, b, a)`` bytes for "rgba", ``(h, s, l, a)`` floats for "hsla"
        from_space: Space of ``color``
        to_space: Target space

    Returns:
        The converted 4-tuple. Same-space conversion returns ``color`` as is.
    """
    fs, ts = from_space.lower(), to_space.lower()
    for space in (fs, ts):
        if space not in COLOR_SPACES:
            raise ValueError(f"Unknown space: {space}")
    if fs == ts:
        return color
    if len(color) != 4:
        raise ValueError(f"{fs} expects a 4-channel tuple, got {len(color)} channels")
    return CONVERT[(fs, ts)](cast(tuple, color))
