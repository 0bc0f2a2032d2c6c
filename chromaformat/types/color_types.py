from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

RGBTuple = Tuple[float, float, float]
RGBATuple = Tuple[float, float, float, float]
ByteTriple = Tuple[int, int, int]
ColorValue = Union[RGBTuple, RGBATuple, list, ndarray]

VALID_CHANNEL_COUNTS = (3, 4)


def element_to_array(element: ColorValue) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: tuple, list, or already an ndarray

    Returns:
        numpy array representation with dtype float
    """
    if isinstance(element, ndarray):
        arr = element
    elif isinstance(element, (tuple, list)):
        arr = np.array(element)
    else:
        raise TypeError(f"Unsupported color input type: {type(element).__name__}")
    if arr.dtype == object or not np.issubdtype(arr.dtype, np.number):
        raise TypeError(f"Color channels must be numeric, got dtype {arr.dtype}")
    return arr.astype(float)
