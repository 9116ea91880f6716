from __future__ import annotations
from typing import Callable, ClassVar, Tuple
import numpy as np
from ..conversions.numbers import as_byte
from ..types.format_type import RGBA_DTYPE, U32_MAX
from ..types.color_types import ByteVector
from .color_base import ColorBase


def _parse_css_hex(text: str) -> ByteVector:
    """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` into bytes."""
    if not isinstance(text, str):
        raise TypeError("hex color must be a string")
    digits = text.strip()
    if not digits.startswith("#"):
        raise ValueError(f"hex color must start with '#', got {text!r}")
    digits = digits[1:]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        raise ValueError(f"invalid hex color length: {text!r}")
    try:
        packed = int(digits, 16)
    except ValueError:
        raise ValueError(f"invalid hex digits in {text!r}") from None
    return (packed >> 24) & 0xFF, (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


class RGBA(ColorBase):
    """
    Color with four 8-bit channels.

    The 32-bit encoding is ``0xRRGGBBAA``: red in the highest byte, alpha in
    the lowest. ``from_hex`` and ``to_u32`` are exact inverses.
    """
    __slots__ = ()

    channel_names: ClassVar[Tuple[str, str, str, str]] = ("r", "g", "b", "a")
    packed_dtype: ClassVar[np.dtype] = RGBA_DTYPE

    # attached in .color
    to_hsla: Callable
    from_hsla: Callable

    def __init__(self, r: int, g: int, b: int, a: int = 255) -> None:
        self._freeze((
            as_byte(r, "r"),
            as_byte(g, "g"),
            as_byte(b, "b"),
            as_byte(a, "a"),
        ))

    @classmethod
    def from_components(cls, r: int, g: int, b: int, a: int) -> RGBA:
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, hex: int) -> RGBA:
        """Build a color from a packed ``0xRRGGBBAA`` integer."""
        if isinstance(hex, bool) or not isinstance(hex, (int, np.integer)):
            raise TypeError(f"hex must be an integer, got {type(hex).__name__}")
        hex = int(hex)
        if not 0 <= hex <= U32_MAX:
            raise ValueError(f"hex must fit in 32 bits, got {hex:#x}")
        return cls((hex >> 24) & 0xFF, (hex >> 16) & 0xFF, (hex >> 8) & 0xFF, hex & 0xFF)

    @classmethod
    def from_css_hex(cls, text: str) -> RGBA:
        return cls(*_parse_css_hex(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> RGBA:
        return cls(*cls._unpack(data))

    # ------------------ ACCESSORS ------------------
    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def a(self) -> int:
        return self._value[3]

    # ------------------ OPERATIONS ------------------
    def blend(self, other: RGBA) -> RGBA:
        """
        Midpoint of two colors, channel by channel, alpha included.

        Each channel is ``(self_c + other_c) // 2``. This is not alpha
        compositing: alpha does not weight the color channels.
        """
        if not isinstance(other, RGBA):
            raise TypeError(f"cannot blend RGBA with {type(other).__name__}")
        return RGBA(*((x + y) // 2 for x, y in zip(self._value, other._value)))

    def to_u32(self) -> int:
        r, g, b, a = self._value
        return (r << 24) | (g << 16) | (b << 8) | a

    def to_css_hex(self) -> str:
        return f"#{self.to_u32():08x}"

    def __int__(self) -> int:
        return self.to_u32()

    def __hash__(self) -> int:
        return hash((self.__class__, self._value))
