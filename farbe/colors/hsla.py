from __future__ import annotations
from typing import Callable, ClassVar, Tuple
import numpy as np
from ..conversions.numbers import as_unit
from ..types.format_type import HSLA_DTYPE
from .color_base import ColorBase


class HSLA(ColorBase):
    """
    Hue/saturation/lightness/alpha color with single-precision channels.

    Hue is a fraction of a full turn. Channels are nominally in [0, 1] but are
    never clamped: values that drift out of range through arithmetic (fading
    repeatedly, blending out-of-range inputs) are kept as they are.

    Every operation returns a new value except ``fade_out``, which rewrites
    the alpha channel of the receiver.
    """
    __slots__ = ()
    __hash__ = None  # fade_out mutates

    channel_names: ClassVar[Tuple[str, str, str, str]] = ("h", "s", "l", "a")
    packed_dtype: ClassVar[np.dtype] = HSLA_DTYPE

    # attached in .color
    to_rgba: Callable
    from_rgba: Callable

    def __init__(self, h: float, s: float, l: float, a: float = 1.0) -> None:
        self._freeze((
            as_unit(h, "h"),
            as_unit(s, "s"),
            as_unit(l, "l"),
            as_unit(a, "a"),
        ))

    @classmethod
    def create(cls, h: float, s: float, l: float, a: float = 1.0) -> HSLA:
        return cls(h, s, l, a)

    @classmethod
    def from_bytes(cls, data: bytes) -> HSLA:
        return cls(*cls._unpack(data))

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def s(self) -> float:
        return self._value[1]

    @property
    def l(self) -> float:
        return self._value[2]

    @property
    def a(self) -> float:
        return self._value[3]

    def blend(self, other: HSLA) -> HSLA:
        """
        Field-wise arithmetic mean.

        Hue is averaged on a straight line, not around the circle: blending
        hue 0.0 with hue 0.9 gives 0.45.
        """
        if not isinstance(other, HSLA):
            raise TypeError(f"cannot blend HSLA with {type(other).__name__}")
        return HSLA(*((x + y) / 2 for x, y in zip(self._value, other._value)))

    def grayscale(self) -> HSLA:
        h, _, l, a = self._value
        return HSLA(h, 0.0, l, a)

    def opacity(self, factor: float) -> HSLA:
        """Return a copy with alpha multiplied by ``factor`` (unclamped)."""
        h, s, l, a = self._value
        return HSLA(h, s, l, a * factor)

    with_opacity = opacity

    def fade_out(self, factor: float) -> None:
        """Multiply alpha by ``factor`` in place. h, s and l are untouched."""
        self._write_channel(3, as_unit(self._value[3] * factor, "a"))
