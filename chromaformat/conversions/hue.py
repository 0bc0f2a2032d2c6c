import math
import numpy as np
from numpy import ndarray as NDArray

from .numbers import round_half_up, np_round_half_up
from ..types.format_type import HUE_360


def unit_rgb_to_hue(r: float, g: float, b: float) -> float:
    """
    Hue angle shared by HSL and HSV.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        float: hue in degrees [0, 360). 0 for achromatic colors.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return 0.0
    if max_c == r:
        # truncated remainder, keeps the sign of (g - b)
        hue = math.fmod((g - b) / delta, 6)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    hue *= 60

    if hue < 0:
        hue += HUE_360
    return hue


def np_unit_rgb_to_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: hue angle shared by HSL and HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hue: array of the broadcast shape, degrees [0, 360)
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

    hue = np.zeros(out_shape)
    mask = delta > 0
    # Branch precedence: red, then green, then blue
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = np.fmod((g[mask_r] - b[mask_r]) / delta[mask_r], 6)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue *= 60

    return np.where(hue < 0, hue + HUE_360, hue)


def format_hue(hue: float) -> int:
    """Whole degrees in [0, 360); 359.6 becomes 0 rather than 360."""
    return round_half_up(hue) % HUE_360


def np_format_hue(hue: NDArray) -> NDArray:
    return np_round_half_up(hue) % HUE_360
