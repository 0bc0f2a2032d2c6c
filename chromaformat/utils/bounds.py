"""Bounding of unit channels with boundednumbers policies."""

import warnings
import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function


def is_unit_range(channels: np.ndarray) -> bool:
    """True when every channel lies in [0, 1]."""
    channels = np.asarray(channels, dtype=float)
    return bool(np.all((channels >= 0.0) & (channels <= 1.0)))


def bound_channels(channels: np.ndarray, bound_type: BoundType = BoundType.CLAMP) -> np.ndarray:
    """
    Apply a bound type to unit channels.

    Args:
        channels: Float array of channel values
        bound_type: CLAMP (default) or any other BoundType to fold values
            into [0, 1]; IGNORE keeps the raw values

    Returns:
        Bounded float array of the same shape
    """
    channels = np.asarray(channels, dtype=float)
    if bound_type is BoundType.IGNORE:
        if not is_unit_range(channels):
            warnings.warn(
                "Color channels outside [0, 1] are kept as-is; "
                "formatted output is extrapolated and may leave the usual ranges",
                UserWarning,
                stacklevel=3,
            )
        return channels
    fn = bound_type_to_np_function[bound_type]
    return np.asarray(fn(channels, 0.0, 1.0), dtype=float)
