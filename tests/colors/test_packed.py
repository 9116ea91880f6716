import struct
import numpy as np
import pytest
from farbe import RGBA, HSLA, RGBA_DTYPE, HSLA_DTYPE


def test_packed_sizes_have_no_padding():
    assert RGBA_DTYPE.itemsize == 4
    assert HSLA_DTYPE.itemsize == 16


def test_rgba_packs_in_channel_order():
    assert RGBA(1, 2, 3, 4).to_bytes() == b"\x01\x02\x03\x04"
    assert RGBA.from_bytes(b"\x01\x02\x03\x04") == RGBA(1, 2, 3, 4)


def test_hsla_packs_little_endian_floats():
    color = HSLA(0.25, 0.5, 0.75, 1.0)
    assert color.to_bytes() == struct.pack("<4f", 0.25, 0.5, 0.75, 1.0)
    assert HSLA.from_bytes(color.to_bytes()) == color


def test_from_bytes_accepts_numpy_records():
    record = np.array([(10, 20, 30, 40)], dtype=RGBA_DTYPE)
    assert RGBA.from_bytes(record.tobytes()).value == (10, 20, 30, 40)


def test_from_bytes_rejects_wrong_size():
    with pytest.raises(ValueError):
        RGBA.from_bytes(b"\x00\x00\x00")
    with pytest.raises(ValueError):
        HSLA.from_bytes(b"\x00" * 4)
