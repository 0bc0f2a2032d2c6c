import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import BYTE_MAX, PERCENT_MAX
from ..types.color_types import ByteTriple


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties away from zero (127.5 -> 128, -2.5 -> -3)."""
    magnitude = abs(x)
    whole = math.floor(magnitude)
    # the remainder is exact, abs(x) + 0.5 is not
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, x))


def np_round_half_up(x: NDArray) -> NDArray:
    """Vectorized: round to the nearest integer, ties away from zero."""
    x = np.asarray(x, dtype=float)
    magnitude = np.abs(x)
    whole = np.floor(magnitude)
    whole = whole + (magnitude - whole >= 0.5)
    return (np.sign(x) * whole).astype(int)


def unit_to_byte(x: float) -> int:
    return round_half_up(x * BYTE_MAX)


def unit_to_percent(x: float) -> int:
    return round_half_up(x * PERCENT_MAX)


def np_unit_to_byte(x: NDArray) -> NDArray:
    return np_round_half_up(np.asarray(x, dtype=float) * BYTE_MAX)


def np_unit_to_percent(x: NDArray) -> NDArray:
    return np_round_half_up(np.asarray(x, dtype=float) * PERCENT_MAX)


def unit_rgb_to_bytes(r: float, g: float, b: float) -> ByteTriple:
    """Scale unit RGB channels to the 0..255 byte range."""
    return unit_to_byte(r), unit_to_byte(g), unit_to_byte(b)
