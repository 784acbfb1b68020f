"""css-colour — RGB(A)/HSL(A) colour values that print as CSS."""

from css_colour.core.errors import ColourError, InvalidColourArguments, InvalidHexColour
from css_colour.core.hex_parser import HexComponents, parse_hex_colour
from css_colour.core.types import HSLColour, RGBColour, rgb

__all__ = [
    'ColourError',
    'HSLColour',
    'HexComponents',
    'InvalidColourArguments',
    'InvalidHexColour',
    'RGBColour',
    'parse_hex_colour',
    'rgb',
]
