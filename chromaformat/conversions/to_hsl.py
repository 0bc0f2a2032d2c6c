import numpy as np
from numpy import ndarray as NDArray

from .hue import unit_rgb_to_hue, np_unit_rgb_to_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation; the denominator only vanishes for extrapolated channels
    denominator = 1 - abs(2 * lightness - 1)
    if delta == 0 or denominator == 0:
        saturation = 0.0
    else:
        saturation = delta / denominator

    return unit_rgb_to_hue(r, g, b), saturation, lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation
    denominator = 1 - np.abs(2 * lightness - 1)
    saturation = np.zeros(out_shape)
    mask = (delta != 0) & (denominator != 0)
    saturation[mask] = delta[mask] / denominator[mask]

    hue = np_unit_rgb_to_hue(r, g, b)
    return np.stack([hue, saturation, lightness], axis=-1)
