"""
Chromaformat String Formatters
==============================

Turn a :class:`~chromaformat.colors.Color` into display strings.

Formatters
----------
    to_rgb(color)                  -> "RGB(255, 0, 0)"
    to_hex(color)                  -> "#FF0000"
    to_hex(color, with_alpha=True) -> "#FFFF0000"   (alpha first)
    to_hsl(color)                  -> "HSL(0°, 100%, 50%)"
    to_hsv(color)                  -> "HSV(0°, 100%, 100%)"
    to_cmyk(color)                 -> "CMYK(0%, 100%, 100%, 0%)"

Dispatch
--------
    format_color(color, fmt)   single format by ColorFormat or name
    format_all(color)          dict of every format, in display order
    np_format(colors, fmt)     vectorized over an (..., 3|4) array

All byte and percent values use round-half-away-from-zero.
"""

from .formatters import (
    to_rgb,
    to_hex,
    to_hsl,
    to_hsv,
    to_cmyk,
    format_color,
    format_all,
    resolve_format,
    FORMATTERS,
)
from .np_formatters import np_format

__all__ = [
    'to_rgb',
    'to_hex',
    'to_hsl',
    'to_hsv',
    'to_cmyk',
    'format_color',
    'format_all',
    'resolve_format',
    'FORMATTERS',
    'np_format',
]
