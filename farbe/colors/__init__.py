"""
Farbe Color Classes
===================

Two small value types and the conversions between them.

- ``RGBA``: four 8-bit channels, hashable and immutable.
- ``HSLA``: four single-precision channels, hue as a fraction of a turn.
  Immutable except for ``fade_out``, which rewrites alpha in place.

Usage
-----
>>> from farbe.colors import RGBA, HSLA
>>> red = RGBA.from_hex(0xFF0000FF)
>>> red.to_hsla()
HSLA(h=0.0, s=1.0, l=0.5, a=1.0)
>>> RGBA(255, 0, 0).blend(RGBA(0, 0, 255))
RGBA(r=127, g=0, b=127, a=255)
>>> HSLA(240 / 360, 1.0, 0.5).grayscale().s
0.0

Notes
-----
- ``RGBA.blend`` is an integer midpoint, not alpha compositing.
- ``HSLA.blend`` averages hue linearly, without wrapping around the circle.
- Importing this package attaches the cross-type conversions
  (``RGBA.to_hsla``, ``RGBA.from_hsla``, ``HSLA.to_rgba``, ``HSLA.from_rgba``).
"""

from .color_base import ColorBase
from .rgba import RGBA
from .hsla import HSLA
from .color import rgba_to_hsla, hsla_to_rgba

__all__ = ['ColorBase', 'RGBA', 'HSLA', 'rgba_to_hsla', 'hsla_to_rgba']
