from __future__ import annotations
from typing import ClassVar, Iterator, Tuple
import numpy as np


class ColorBase:
    """
    Four-channel color value stored in ``__slots__``.

    Instances are frozen once ``__init__`` finishes. Subclasses that need a
    documented in-place update go through ``_write_channel``.
    """
    __slots__ = ('_value', '_is_frozen')

    num_channels: ClassVar[int] = 4
    channel_names: ClassVar[Tuple[str, str, str, str]]
    packed_dtype: ClassVar[np.dtype]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self, value: tuple) -> None:
        self._value = value
        super().__setattr__('_is_frozen', True)

    def _write_channel(self, index: int, channel) -> None:
        values = list(self._value)
        values[index] = channel
        super().__setattr__('_value', tuple(values))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> tuple:
        return self._value

    def __iter__(self) -> Iterator:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    # ------------------ PACKED LAYOUT ------------------
    def to_bytes(self) -> bytes:
        """Return the packed struct image of this value."""
        return np.array([self._value], dtype=self.packed_dtype).tobytes()

    @classmethod
    def _unpack(cls, data: bytes) -> tuple:
        if len(data) != cls.packed_dtype.itemsize:
            raise ValueError(
                f"{cls.__name__} expects {cls.packed_dtype.itemsize} packed bytes, got {len(data)}"
            )
        record = np.frombuffer(data, dtype=cls.packed_dtype)[0]
        return tuple(record[name] for name in cls.channel_names)
