import numpy as np
from numpy import ndarray as NDArray


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert unit RGB to CMYK.

    Black is taken first; cyan, magenta and yellow are relative to the
    remaining (1 - K). Pure black yields (0, 0, 0, 1).

    Returns:
        Tuple[float, float, float, float]: (c, m, y, k) in [0, 1]
    """
    k = 1 - max(r, g, b)

    if k == 1:
        return 0.0, 0.0, 0.0, k

    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return c, m, y, k


def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to CMYK.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        cmyk: array of shape (..., 4): (c, m, y, k) in [0, 1]
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    k = 1 - np.maximum.reduce([r, g, b])

    c = np.zeros(out_shape)
    m = np.zeros(out_shape)
    y = np.zeros(out_shape)

    mask = k != 1
    rest = 1 - k[mask]
    c[mask] = (1 - r[mask] - k[mask]) / rest
    m[mask] = (1 - g[mask] - k[mask]) / rest
    y[mask] = (1 - b[mask] - k[mask]) / rest

    return np.stack([c, m, y, k], axis=-1)
