"""Colour value types: RGBColour, HSLColour and the rgb() argument-shape factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from css_colour.core.errors import InvalidColourArguments
from css_colour.core.hex_parser import parse_hex_colour
from css_colour.core.validate import format_number, is_bad_num, join_args


@dataclass(frozen=True)
class RGBColour:
    """An sRGB colour with an opacity channel.

    str() gives '#rrggbb' when fully opaque, otherwise 'rgba(r, g, b, a)',
    so instances can be dropped straight into CSS templates:

        red = RGBColour.from_hex('#f00')
        css = f'color: {red}; background: {red.alpha(0.5)};'
        # color: #ff0000; background: rgba(255, 0, 0, 0.5);

    The constructor takes exactly r, g, b and an optional alpha, so a hex
    string or a wrong argument count raises TypeError here. Use rgb() when
    the argument shape is not known in advance: it raises
    InvalidColourArguments for every bad shape.
    """

    r: int
    g: int
    b: int
    a: float = 1

    def __post_init__(self) -> None:
        if is_bad_num(self.r, 255) or is_bad_num(self.g, 255) or is_bad_num(self.b, 255) or is_bad_num(self.a, 1):
            raise InvalidColourArguments(f'Invalid RGBColour arguments: {join_args(self._channels())}')
        # hex output needs whole channel values; numpy and float channels become int
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            whole = int(value)
            if whole != value:
                raise InvalidColourArguments(f'Invalid RGBColour arguments: {join_args(self._channels())}')
            object.__setattr__(self, name, whole)

    @classmethod
    def from_hex(cls, text: str) -> RGBColour:
        """Build from '#rgb' or '#rrggbb'. Raises InvalidHexColour."""
        parsed = parse_hex_colour(text)
        return cls(parsed.r, parsed.g, parsed.b, parsed.a)

    @classmethod
    def from_components(cls, r: int, g: int, b: int, a: float | None = None) -> RGBColour:
        """Build from numbers. An omitted (None) alpha means fully opaque; 0 stays 0."""
        return cls(r, g, b, 1 if a is None else a)

    def alpha(self, alpha: float) -> RGBColour:
        """Return a copy with a different alpha. The receiver is unchanged."""
        return RGBColour(self.r, self.g, self.b, alpha)

    def to_dict(self) -> dict[str, Any]:
        return {'r': self.r, 'g': self.g, 'b': self.b, 'a': self.a}

    def _channels(self) -> tuple:
        return (self.r, self.g, self.b, self.a)

    def __str__(self) -> str:
        if self.a == 1:
            return f'#{self.r:02x}{self.g:02x}{self.b:02x}'
        return f'rgba({self.r}, {self.g}, {self.b}, {format_number(self.a)})'


@dataclass(frozen=True)
class HSLColour:
    """A hue/saturation/lightness colour with an opacity channel.

    h is in degrees [0, 360], s and l are percentages [0, 100].
    """

    h: float
    s: float
    l: float  # noqa: E741
    a: float = 1

    def __post_init__(self) -> None:
        if is_bad_num(self.h, 360) or is_bad_num(self.s, 100) or is_bad_num(self.l, 100) or is_bad_num(self.a, 1):
            raise InvalidColourArguments(f'Invalid HSLColour arguments: {join_args((self.h, self.s, self.l, self.a))}')

    def alpha(self, alpha: float) -> HSLColour:
        """Return a copy with a different alpha. The receiver is unchanged."""
        return HSLColour(self.h, self.s, self.l, alpha)

    def to_dict(self) -> dict[str, Any]:
        return {'h': self.h, 's': self.s, 'l': self.l, 'a': self.a}

    def __str__(self) -> str:
        h, s, l = (format_number(v) for v in (self.h, self.s, self.l))  # noqa: E741
        if self.a == 1:
            return f'hsl({h}, {s}%, {l}%)'
        return f'hsla({h}, {s}%, {l}%, {format_number(self.a)})'


def rgb(*args: Any) -> RGBColour:
    """Build an RGBColour from either one hex string or 3-4 numbers.

    rgb('#f00'), rgb(255, 0, 0) and rgb(255, 0, 0, 0.5) all work. Any other
    argument shape raises InvalidColourArguments.
    """
    if len(args) == 1 and isinstance(args[0], str) and args[0].startswith('#'):
        return RGBColour.from_hex(args[0])
    if len(args) in (3, 4):
        return RGBColour.from_components(*args)
    raise InvalidColourArguments(f'Invalid RGBColour arguments: {join_args(args)}')
