from .format_type import ColorFormat, BYTE_MAX, PERCENT_MAX, HUE_360, format_templates, display_order
from .color_types import ColorValue, RGBTuple, RGBATuple, ByteTriple, element_to_array

__all__ = [
    "ColorFormat",
    "BYTE_MAX",
    "PERCENT_MAX",
    "HUE_360",
    "format_templates",
    "display_order",
    "ColorValue",
    "RGBTuple",
    "RGBATuple",
    "ByteTriple",
    "element_to_array",
]
