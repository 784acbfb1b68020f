"""Errors raised by colour construction."""


class ColourError(ValueError):
    """Base class for every colour construction failure."""


class InvalidColourArguments(ColourError):
    """Argument shape or a channel range was invalid."""


class InvalidHexColour(ColourError):
    """A string matched neither #rgb nor #rrggbb."""
