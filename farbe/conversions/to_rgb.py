import math
from ..types.color_types import UnitTriple


def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitTriple:
    """
    Convert HSL to RGB.

    Hue is a fraction of a full turn and wraps around; saturation and lightness
    are used as given, so out-of-range input yields out-of-range channels.
    A non-finite hue has no sextant and gives the achromatic (l, l, l).

    Args:
        h: Hue, nominally in [0, 1)
        s: Saturation, nominally in [0, 1]
        l: Lightness, nominally in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b), nominally in [0, 1]
    """
    if not math.isfinite(h):
        return l, l, l

    h = h % 1.0
    h6 = h * 6

    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs(h6 % 2 - 1))
    m = l - chroma / 2

    sextant = int(math.floor(h6))

    if sextant == 0:
        r, g, b = chroma, x, 0.0
    elif sextant == 1:
        r, g, b = x, chroma, 0.0
    elif sextant == 2:
        r, g, b = 0.0, chroma, x
    elif sextant == 3:
        r, g, b = 0.0, x, chroma
    elif sextant == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m
