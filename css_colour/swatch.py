"""Render an RGBColour as a solid PNG swatch.

Opaque colours produce an RGB image; anything with alpha != 1 produces an
RGBA image whose alpha band is round(a * 255).

Example:
    css-colour swatch red.png '#f00' --alpha 0.5 --size 32
"""

import numpy as np
from PIL import Image

from css_colour.core.types import RGBColour


def swatch_image(colour: RGBColour, size: int) -> Image.Image:
    """Build a size x size image filled with colour."""
    if size <= 0:
        raise ValueError(f'Swatch size must be positive, got {size}')

    pixel = [colour.r, colour.g, colour.b]
    if colour.a != 1:
        pixel.append(int(round(colour.a * 255)))

    # (size, size, 3) uint8 -> RGB, (size, size, 4) -> RGBA
    arr = np.full((size, size, len(pixel)), pixel, dtype=np.uint8)
    return Image.fromarray(arr)


def write_swatch(colour: RGBColour, path: str, size: int) -> None:
    """Write the swatch for colour to path as PNG."""
    swatch_image(colour, size).save(path, format='PNG')
