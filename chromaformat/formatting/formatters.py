from typing import Callable, Dict

from ..colors import Color
from ..conversions import (
    format_hue,
    unit_rgb_to_bytes,
    unit_rgb_to_cmyk,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_to_byte,
    unit_to_percent,
)
from ..types.format_type import ColorFormat, format_templates, display_order


def to_rgb(color: Color) -> str:
    """Format as ``RGB(R, G, B)`` with each channel in 0..255."""
    return format_templates[ColorFormat.RGB].format(*unit_rgb_to_bytes(*color.rgb))


def to_hex(color: Color, with_alpha: bool = False) -> str:
    """
    Format as ``#RRGGBB``, or ``#AARRGGBB`` with the alpha byte first.

    Args:
        color: Color to format
        with_alpha: Prepend the alpha channel

    Returns:
        str: uppercase, zero-padded hex code
    """
    red, green, blue = unit_rgb_to_bytes(*color.rgb)
    if with_alpha:
        alpha = unit_to_byte(color.alpha)
        return format_templates[ColorFormat.HEX_ALPHA].format(alpha, red, green, blue)
    return format_templates[ColorFormat.HEX].format(red, green, blue)


def to_hsl(color: Color) -> str:
    """Format as ``HSL(H°, S%, L%)``."""
    h, s, l = unit_rgb_to_hsl(*color.rgb)
    return format_templates[ColorFormat.HSL].format(format_hue(h), unit_to_percent(s), unit_to_percent(l))


def to_hsv(color: Color) -> str:
    """Format as ``HSV(H°, S%, V%)``."""
    h, s, v = unit_rgb_to_hsv(*color.rgb)
    return format_templates[ColorFormat.HSV].format(format_hue(h), unit_to_percent(s), unit_to_percent(v))


def to_cmyk(color: Color) -> str:
    """Format as ``CMYK(C%, M%, Y%, K%)``."""
    cmyk = unit_rgb_to_cmyk(*color.rgb)
    return format_templates[ColorFormat.CMYK].format(*(unit_to_percent(x) for x in cmyk))


def to_hex_alpha(color: Color) -> str:
    return to_hex(color, with_alpha=True)


FORMATTERS: Dict[ColorFormat, Callable[[Color], str]] = {
    ColorFormat.RGB: to_rgb,
    ColorFormat.HEX: to_hex,
    ColorFormat.HEX_ALPHA: to_hex_alpha,
    ColorFormat.HSL: to_hsl,
    ColorFormat.HSV: to_hsv,
    ColorFormat.CMYK: to_cmyk,
}


def resolve_format(fmt: ColorFormat | str) -> ColorFormat:
    """Accept a ColorFormat or its (case-insensitive) string value."""
    if isinstance(fmt, ColorFormat):
        return fmt
    if isinstance(fmt, str):
        try:
            return ColorFormat(fmt.lower())
        except ValueError:
            pass
    valid = ", ".join(f.value for f in ColorFormat)
    raise ValueError(f"Unknown color format {fmt!r}; expected one of: {valid}")


def format_color(color: Color, fmt: ColorFormat | str) -> str:
    return FORMATTERS[resolve_format(fmt)](color)


def format_all(color: Color) -> Dict[ColorFormat, str]:
    """Every format of ``color``, in display order."""
    return {fmt: FORMATTERS[fmt](color) for fmt in display_order}
