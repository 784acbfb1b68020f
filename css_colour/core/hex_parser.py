"""Hex colour parsing: #rgb and #rrggbb, case-insensitive, anchored."""

import re
from typing import NamedTuple

from css_colour.core.errors import InvalidHexColour

_HEX3 = re.compile(r'#([a-f0-9])([a-f0-9])([a-f0-9])', re.IGNORECASE)
_HEX6 = re.compile(r'#([a-f0-9]{2})([a-f0-9]{2})([a-f0-9]{2})', re.IGNORECASE)


class HexComponents(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 1


def parse_hex_colour(text: str) -> HexComponents:
    """Parse '#f00' or '#ff0000' into RGBA components (alpha is always 1).

    Shorthand digits are doubled before parsing, so '#0f0' gives (0, 255, 0).
    Raises InvalidHexColour for anything else, including a missing '#'.
    """
    if not isinstance(text, str):
        raise InvalidHexColour(f'Invalid hex colour: {text!r}')

    m = _HEX3.fullmatch(text)
    if m:
        r, g, b = (int(d * 2, 16) for d in m.groups())
        return HexComponents(r, g, b)

    m = _HEX6.fullmatch(text)
    if m:
        r, g, b = (int(pair, 16) for pair in m.groups())
        return HexComponents(r, g, b)

    raise InvalidHexColour(f'Invalid hex colour: {text}')
