"""Tests for css_colour.core.hex_parser — #rgb / #rrggbb parsing."""

import pytest
from css_colour.core.errors import InvalidHexColour
from css_colour.core.hex_parser import HexComponents, parse_hex_colour


class TestSixDigit:
    def test_white(self):
        assert parse_hex_colour('#ffffff') == HexComponents(255, 255, 255, 1)

    def test_black(self):
        assert parse_hex_colour('#000000') == (0, 0, 0, 1)

    def test_blue600(self):
        assert parse_hex_colour('#2563eb') == (37, 99, 235, 1)

    def test_uppercase(self):
        assert parse_hex_colour('#2563EB') == (37, 99, 235, 1)


class TestThreeDigit:
    def test_red_uppercase(self):
        parsed = parse_hex_colour('#F00')
        assert (parsed.r, parsed.g, parsed.b, parsed.a) == (255, 0, 0, 1)

    def test_digits_are_doubled(self):
        # 0f0 -> 00, ff, 00
        assert parse_hex_colour('#0f0') == (0, 255, 0, 1)

    def test_mixed_digits(self):
        # a -> aa (170), 5 -> 55 (85), c -> cc (204)
        assert parse_hex_colour('#a5c') == (170, 85, 204, 1)


class TestInvalid:
    @pytest.mark.parametrize(
        'text',
        [
            '#xyz',
            'ff0000',
            '#ff',
            '#ffff',
            '#fffff',
            '#ffffffff',
            '#ff00001',
            ' #ff0000',
            '#ff0000 ',
            '#ff0000\n',
            '#',
            '',
        ],
    )
    def test_rejected(self, text):
        with pytest.raises(InvalidHexColour):
            parse_hex_colour(text)

    def test_non_string(self):
        with pytest.raises(InvalidHexColour):
            parse_hex_colour(0xFF0000)  # type: ignore[arg-type]

    def test_message_names_input(self):
        with pytest.raises(InvalidHexColour, match='#xyz'):
            parse_hex_colour('#xyz')

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hex_colour('nope')
