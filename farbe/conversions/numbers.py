import math
import warnings
import numpy as np
from boundednumbers import clamp
from ..types.format_type import BYTE_MAX, UNIT_DTYPE, valid_byte_types, valid_unit_types


def as_byte(value, name: str = "channel") -> int:
    """Validate an 8-bit channel value and return it as a plain ``int``."""
    if isinstance(value, bool) or not isinstance(value, valid_byte_types):
        raise TypeError(f"{name} must be an integer byte, got {type(value).__name__}")
    value = int(value)
    if not 0 <= value <= BYTE_MAX:
        raise ValueError(f"{name} must be in [0, {BYTE_MAX}], got {value}")
    return value


def as_unit(value, name: str = "channel") -> float:
    """
    Round a number to single precision. No range check is applied.

    Magnitudes beyond float32 become infinities without a numpy warning.
    """
    if isinstance(value, bool) or not isinstance(value, valid_unit_types):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    with np.errstate(over="ignore"):
        return float(UNIT_DTYPE(value))


def byte_to_unit(value: int) -> float:
    return value / BYTE_MAX


def unit_to_byte(value: float, stacklevel: int = 2) -> int:
    """
    Scale a unit float to a byte, rounding to nearest.

    Results outside [0, 255] can only come from out-of-range HSL input; they are
    clamped into the byte range with a RuntimeWarning. +inf maps to 255, -inf
    and NaN map to 0.

    Args:
        value: Channel value, nominally in [0, 1]
        stacklevel: Passed to ``warnings.warn``; 2 points at the caller
    """
    shifted = value * BYTE_MAX + 0.5
    if math.isfinite(shifted):
        # round half up
        scaled = math.floor(shifted)
    else:
        scaled = BYTE_MAX + 1 if shifted > 0 else -1
    if not 0 <= scaled <= BYTE_MAX:
        warnings.warn(
            f"Channel value {value!r} scales outside the byte range, clamping to [0, {BYTE_MAX}]",
            RuntimeWarning,
            stacklevel=stacklevel,
        )
        scaled = clamp(scaled, 0, BYTE_MAX)
    return int(scaled)
