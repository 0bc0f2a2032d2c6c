"""Basic Chromaformat usage examples.

Run directly with:
    python examples/basic_usage.py [seed]

Each run draws a random color and prints every format, the way a
tap-to-shuffle color card would label it.
"""
import sys

import numpy as np

from chromaformat import Color, to_rgb, to_hex, to_hsl, to_hsv, to_cmyk


def demonstrate_random_color(rng: np.random.Generator) -> None:
    color = Color.random(rng)
    print(color)
    print("      RGB:", to_rgb(color))
    print("      HEX:", to_hex(color))
    print("alpha HEX:", to_hex(color, with_alpha=True))
    print("      HSL:", to_hsl(color))
    print("      HSV:", to_hsv(color))
    print("     CMYK:", to_cmyk(color))


def demonstrate_named_colors() -> None:
    # Named palette constants, built from bytes.
    palette = {
        "red": Color.from_bytes(255, 0, 0),
        "teal": Color.from_bytes(0, 128, 128),
        "half-transparent black": Color.from_bytes(0, 0, 0, 128),
    }
    for name, color in palette.items():
        print(f"{name:>24}: {to_hex(color, with_alpha=True)}  {to_hsl(color)}  {to_cmyk(color)}")


if __name__ == "__main__":
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    demonstrate_random_color(np.random.default_rng(seed))
    demonstrate_named_colors()
