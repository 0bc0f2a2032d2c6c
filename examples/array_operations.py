"""Array-friendly formatting in Chromaformat.

Run with:
    python examples/array_operations.py
"""
import warnings

import numpy as np

from chromaformat import BoundType, ColorFormat, np_format, np_unit_rgb_to_hsv


def demonstrate_arrays() -> None:
    # A 2x3 grid of random colors, formatted in one pass.
    rng = np.random.default_rng(7)
    grid = rng.random((2, 3, 4))
    print("Hex grid:\n", np_format(grid, ColorFormat.HEX_ALPHA))
    print("HSV numbers:\n", np.round(np_unit_rgb_to_hsv(grid[..., 0], grid[..., 1], grid[..., 2]), 3))

    # Extended-range channels: clamped by default, extrapolated on request.
    hdr = np.array([[1.2, 0.5, -0.1]])
    print("Clamped:", np_format(hdr, "rgb"))
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        print("Extrapolated:", np_format(hdr, "rgb", bound_type=BoundType.IGNORE))


def main() -> None:
    demonstrate_arrays()


if __name__ == "__main__":
    main()
