# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    RGB = "rgb"
    HEX = "hex"
    HEX_ALPHA = "hex_alpha"
    HSL = "hsl"
    HSV = "hsv"
    CMYK = "cmyk"


BYTE_MAX = 255
PERCENT_MAX = 100
HUE_360 = 360

format_templates = {
    ColorFormat.RGB: "RGB({}, {}, {})",
    ColorFormat.HEX: "#{:02X}{:02X}{:02X}",
    ColorFormat.HEX_ALPHA: "#{:02X}{:02X}{:02X}{:02X}",
    ColorFormat.HSL: "HSL({}°, {}%, {}%)",
    ColorFormat.HSV: "HSV({}°, {}%, {}%)",
    ColorFormat.CMYK: "CMYK({}%, {}%, {}%, {}%)",
}

# Order in which format_all reports a color
display_order = (
    ColorFormat.RGB,
    ColorFormat.HEX,
    ColorFormat.HEX_ALPHA,
    ColorFormat.HSL,
    ColorFormat.HSV,
    ColorFormat.CMYK,
)
