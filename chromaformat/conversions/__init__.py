"""
Chromaformat Numeric Conversions
================================

Numeric building blocks behind the string formatters: byte and percent
scaling with a pinned rounding rule, and unit RGB → HSL / HSV / CMYK.
Every conversion has a scalar function and a vectorized (numpy) twin.

Features
--------
- Round-half-away-from-zero for every byte / percent scaling
- Shared hue computation for HSL and HSV
- Guarded divisions (achromatic colors, pure black)
- Vectorized ``np_*`` functions that broadcast like numpy ufuncs

Conversion Functions
-------------------

Scaling:
    round_half_up(x) / np_round_half_up(x)
    unit_to_byte(x) / np_unit_to_byte(x)
        [0, 1] → [0, 255]
    unit_to_percent(x) / np_unit_to_percent(x)
        [0, 1] → [0, 100]
    unit_rgb_to_bytes(r, g, b)
        (r, g, b) → (R, G, B) bytes

Hue:
    unit_rgb_to_hue(r, g, b) / np_unit_rgb_to_hue(r, g, b)
        Degrees in [0, 360)
    format_hue(h) / np_format_hue(h)
        Whole degrees in [0, 360)

RGB → HSL / HSV / CMYK:
    unit_rgb_to_hsl(r, g, b) / np_unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hsv(r, g, b) / np_unit_rgb_to_hsv(r, g, b)
    unit_rgb_to_cmyk(r, g, b) / np_unit_rgb_to_cmyk(r, g, b)

Examples
--------
>>> from chromaformat.conversions import unit_rgb_to_hsl, unit_to_byte
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> unit_to_byte(0.5)
128
"""

from .numbers import (
    round_half_up,
    np_round_half_up,
    unit_to_byte,
    unit_to_percent,
    np_unit_to_byte,
    np_unit_to_percent,
    unit_rgb_to_bytes,
)
from .hue import unit_rgb_to_hue, np_unit_rgb_to_hue, format_hue, np_format_hue
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk

__all__ = [
    # Scaling
    'round_half_up',
    'np_round_half_up',
    'unit_to_byte',
    'unit_to_percent',
    'np_unit_to_byte',
    'np_unit_to_percent',
    'unit_rgb_to_bytes',

    # Hue
    'unit_rgb_to_hue',
    'np_unit_rgb_to_hue',
    'format_hue',
    'np_format_hue',

    # RGB → HSL / HSV / CMYK
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_cmyk',
    'np_unit_rgb_to_cmyk',
]
