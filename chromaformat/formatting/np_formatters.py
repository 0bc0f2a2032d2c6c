import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType

from ..conversions import (
    np_format_hue,
    np_unit_rgb_to_cmyk,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_unit_to_byte,
    np_unit_to_percent,
)
from ..types.color_types import VALID_CHANNEL_COUNTS
from ..types.format_type import ColorFormat, format_templates
from ..utils import bound_channels
from .formatters import resolve_format


def _prepare_colors(colors: NDArray, bound_type: BoundType) -> NDArray:
    arr = np.asarray(colors)
    if not np.issubdtype(arr.dtype, np.number):
        raise TypeError(f"Color channels must be numeric, got dtype {arr.dtype}")
    arr = arr.astype(float)
    if arr.ndim == 0 or arr.shape[-1] not in VALID_CHANNEL_COUNTS:
        raise ValueError(f"Expected last dimension of 3 or 4 channels, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Color channels must be finite")
    if arr.shape[-1] == 3:
        alpha = np.ones(arr.shape[:-1] + (1,))
        arr = np.concatenate([arr, alpha], axis=-1)
    return bound_channels(arr, bound_type)


def _numeric_fields(arr: NDArray, fmt: ColorFormat) -> NDArray:
    """Integer fields of each formatted string, shape (..., n_fields)."""
    r, g, b, a = arr[..., 0], arr[..., 1], arr[..., 2], arr[..., 3]

    if fmt in (ColorFormat.RGB, ColorFormat.HEX):
        return np_unit_to_byte(arr[..., :3])
    if fmt is ColorFormat.HEX_ALPHA:
        return np_unit_to_byte(np.stack([a, r, g, b], axis=-1))
    if fmt is ColorFormat.HSL:
        cylindrical = np_unit_rgb_to_hsl(r, g, b)
    elif fmt is ColorFormat.HSV:
        cylindrical = np_unit_rgb_to_hsv(r, g, b)
    else:
        return np_unit_to_percent(np_unit_rgb_to_cmyk(r, g, b))

    hue = np_format_hue(cylindrical[..., 0])
    rest = np_unit_to_percent(cylindrical[..., 1:])
    return np.concatenate([hue[..., None], rest], axis=-1)


def np_format(
    colors: NDArray,
    fmt: ColorFormat | str,
    bound_type: BoundType = BoundType.CLAMP,
) -> NDArray:
    """
    Vectorized: format an array of unit colors.

    Args:
        colors: array of shape (..., 3) or (..., 4); alpha defaults to 1
        fmt: target ColorFormat (or its string value)
        bound_type: policy for channels outside [0, 1]

    Returns:
        object array of str with shape colors.shape[:-1]
    """
    fmt = resolve_format(fmt)
    arr = _prepare_colors(colors, bound_type)
    fields = _numeric_fields(arr, fmt)

    template = format_templates[fmt]
    flat = fields.reshape(-1, fields.shape[-1])
    out = np.empty(flat.shape[0], dtype=object)
    for i, row in enumerate(flat.tolist()):
        out[i] = template.format(*row)
    return out.reshape(fields.shape[:-1])
