"""Tests for css_colour.core.report — text and JSON output."""

import json

from css_colour.core.report import format_json, format_text
from css_colour.core.types import HSLColour, RGBColour


class TestFormatText:
    def test_rgb_is_css_value(self):
        assert format_text(RGBColour(255, 0, 0, 0.5)) == 'rgba(255, 0, 0, 0.5)'

    def test_hsl_is_css_value(self):
        assert format_text(HSLColour(0, 100, 50)) == 'hsl(0, 100%, 50%)'


class TestFormatJson:
    def test_rgb(self):
        obj = json.loads(format_json(RGBColour.from_hex('#2563eb')))
        assert obj == {
            'model': 'rgb',
            'css': '#2563eb',
            'channels': {'r': 37, 'g': 99, 'b': 235, 'a': 1},
        }

    def test_hsl_with_alpha(self):
        obj = json.loads(format_json(HSLColour(210, 50, 40, 0.25)))
        assert obj['model'] == 'hsl'
        assert obj['css'] == 'hsla(210, 50%, 40%, 0.25)'
        assert obj['channels'] == {'h': 210, 's': 50, 'l': 40, 'a': 0.25}
