"""Report builder — text and JSON output for css-colour results."""

import json
from typing import Any

from css_colour.core.types import HSLColour, RGBColour


def model_name(colour: RGBColour | HSLColour) -> str:
    return 'hsl' if isinstance(colour, HSLColour) else 'rgb'


def format_text(colour: RGBColour | HSLColour) -> str:
    """The CSS value on its own, ready to paste into a stylesheet."""
    return str(colour)


def format_json(colour: RGBColour | HSLColour) -> str:
    """Format a colour as JSON: model, CSS value and raw channels."""
    obj: dict[str, Any] = {
        'model': model_name(colour),
        'css': str(colour),
        'channels': colour.to_dict(),
    }
    return json.dumps(obj, indent=2)
