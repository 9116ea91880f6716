from __future__ import annotations
from typing import Tuple

ByteVector = Tuple[int, int, int, int]
UnitVector = Tuple[float, float, float, float]
UnitTriple = Tuple[float, float, float]
ColorElement = ByteVector | UnitVector
