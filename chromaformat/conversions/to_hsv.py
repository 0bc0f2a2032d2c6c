import numpy as np
from numpy import ndarray as NDArray

from .hue import unit_rgb_to_hue, np_unit_rgb_to_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    saturation = 0.0 if max_c == 0 else (max_c - min_c) / max_c

    return unit_rgb_to_hue(r, g, b), saturation, max_c


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    V = np.maximum.reduce([r, g, b])
    m = np.minimum.reduce([r, g, b])
    delta = V - m

    S = np.zeros(out_shape)
    mask = V != 0
    S[mask] = delta[mask] / V[mask]

    h = np_unit_rgb_to_hue(r, g, b)
    return np.stack([h, S, V], axis=-1)
