# No internal dependencies
from typing import Literal
import numpy as np

ColorSpace = Literal["rgba", "hsla"]
COLOR_SPACES = ("rgba", "hsla")

BYTE_MAX = 255
HUE_360 = 360
U32_MAX = 0xFFFFFFFF

UNIT_DTYPE = np.float32

# Packed layouts shared with the C structs: four sequential fields, no padding.
RGBA_DTYPE = np.dtype([("r", "u1"), ("g", "u1"), ("b", "u1"), ("a", "u1")])
HSLA_DTYPE = np.dtype([("h", "<f4"), ("s", "<f4"), ("l", "<f4"), ("a", "<f4")])

valid_byte_types = (int, np.integer)
valid_unit_types = (int, float, np.integer, np.floating)
