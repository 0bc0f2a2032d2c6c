"""Chromaformat: display strings for unit RGBA colors."""

from .colors import Color
from .types.format_type import ColorFormat
from .formatting import (
    to_rgb,
    to_hex,
    to_hsl,
    to_hsv,
    to_cmyk,
    format_color,
    format_all,
    np_format,
)
from .conversions import (
    round_half_up,
    unit_to_byte,
    unit_to_percent,
    unit_rgb_to_hue,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_cmyk,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_cmyk,
)

from boundednumbers import BoundType

__version__ = "1.0.0"

__all__ = [
    # color value
    "Color",
    "ColorFormat",
    "BoundType",
    # formatters
    "to_rgb",
    "to_hex",
    "to_hsl",
    "to_hsv",
    "to_cmyk",
    "format_color",
    "format_all",
    "np_format",
    # numeric conversions
    "round_half_up",
    "unit_to_byte",
    "unit_to_percent",
    "unit_rgb_to_hue",
    "unit_rgb_to_hsl",
    "unit_rgb_to_hsv",
    "unit_rgb_to_cmyk",
    "np_unit_rgb_to_hsl",
    "np_unit_rgb_to_hsv",
    "np_unit_rgb_to_cmyk",
    "__version__",
]
