"""Tests for the legacy coordinate decoder."""

import math
import string

import pytest

from route_plotter.errors import MalformedInputError
from route_plotter.parsers.coords import CoordsSource, decode_symbol

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def encode(*values: int) -> str:
    return ''.join(ALPHABET[value] for value in values)


def encode_group(flags, lat_dms, lon_dms, *extra) -> str:
    return encode(flags, *lat_dms, *lon_dms, *extra)


def expected_angle(dms) -> float:
    degrees, minutes, seconds = dms
    return degrees + (minutes + seconds / 60) / 60


@pytest.fixture
def source():
    return CoordsSource()


class TestDecodeSymbol:
    """Tests for the base-62 alphabet."""

    def test_alphabet(self):
        for value, char in enumerate(ALPHABET):
            assert decode_symbol(char) == value

    def test_invalid_characters(self):
        for char in '-()@ !/_':
            assert decode_symbol(char) == -1


class TestCoordsSource:
    """Tests for CoordsSource."""

    @pytest.mark.parametrize('flags, lat_sign, lat_offset, lon_sign, lon_offset', [
        (0b000000, 1, 0, 1, 0),
        (0b000010, -1, 0, 1, 0),
        (0b001000, 1, 0, -1, 0),
        (0b001010, -1, 0, -1, 0),
        (0b000100, 1, 60, 1, 0),
        (0b010000, 1, 0, 1, 60),
        (0b100000, 1, 0, 1, 120),
        (0b000110, -1, 60, 1, 0),
        (0b111010, -1, 0, -1, 180),
    ])
    def test_group_bit_layout(self, source, flags, lat_sign, lat_offset, lon_sign, lon_offset):
        """Latitude and longitude follow the flag bits of the first symbol."""
        lat_dms, lon_dms = (12, 34, 56), (7, 8, 9)
        name, route = source.parse(encode_group(flags, lat_dms, lon_dms))

        assert name is None
        assert len(route) == 1
        node = route[0]
        assert node.lat == pytest.approx(lat_sign * (expected_angle(lat_dms) + lat_offset))
        assert node.lon == pytest.approx(lon_sign * (expected_angle(lon_dms) + lon_offset))
        assert node.highlight is False
        assert node.hold is None
        assert node.label is None

    def test_all_zero_group(self, source):
        _, route = source.parse('AAAAAAA')
        assert (route[0].lat, route[0].lon) == (0.0, 0.0)

    def test_highlight_extension(self, source):
        _, route = source.parse(encode_group(0b1, (51, 30, 0), (0, 30, 0), 60))
        assert route[0].highlight is True
        assert route[0].hold is None

    def test_hold_extension(self, source):
        """extra1=15 gives course 90, bit 5 adds 3; bit 4 is left turns; low bits are the length."""
        _, route = source.parse(encode_group(0b1, (51, 30, 0), (0, 30, 0), 15, 0b110011))
        hold = route[0].hold

        assert hold is not None
        assert hold.length == 3
        assert hold.course == 93
        assert hold.left_turns is True
        assert route[0].highlight is False

    def test_hold_right_turns_without_offset(self, source):
        _, route = source.parse(encode_group(0b1, (51, 30, 0), (0, 30, 0), 45, 0b000101))
        hold = route[0].hold
        assert (hold.length, hold.course, hold.left_turns) == (5, 270, False)

    def test_zero_length_hold_is_kept(self, source):
        _, route = source.parse(encode_group(0b1, (51, 30, 0), (0, 30, 0), 10, 0))
        assert route[0].hold is not None
        assert route[0].hold.length == 0
        assert route[0].hold.course == 60

    def test_discontinuity(self, source):
        group = encode_group(0, (51, 0, 0), (1, 0, 0))
        _, route = source.parse(f'{group}-{group}')

        assert len(route) == 3
        gap = route[1]
        assert gap.is_discontinuity()
        assert math.isnan(gap.lat) and math.isnan(gap.lon)
        assert gap.highlight is False
        assert gap.hold is None
        assert gap.label is None
        assert len(route.polylines()) == 2

    def test_leading_discontinuity(self, source):
        _, route = source.parse('-AAAAAAA')
        assert route[0].is_discontinuity()
        assert not route[1].is_discontinuity()

    def test_label_attaches_to_previous_point(self, source):
        group = encode_group(0, (51, 0, 0), (1, 0, 0))
        _, route = source.parse(f'{group}{group}(HELLO)')

        assert len(route) == 2
        assert route[0].label is None
        assert route[1].label == 'HELLO'

    def test_label_with_nested_brackets_and_spaces(self, source):
        _, route = source.parse('AAAAAAA(HOLD (EXPECT) HERE)CAAAAAA')

        assert len(route) == 2
        assert route[0].label == 'HOLD (EXPECT) HERE'
        assert route[1].label is None

    def test_leading_name(self, source):
        name, route = source.parse('MYROUTE AAAAAAA')
        assert name == 'MYROUTE'
        assert len(route) == 1

    def test_first_token_with_bracket_is_not_a_name(self, source):
        name, route = source.parse('AAAAAAA(TWO WORDS)')
        assert name is None
        assert route[0].label == 'TWO WORDS'

    def test_at_sentinel_is_skipped(self, source):
        name, route = source.parse('NAME @AAAAAAA')
        assert name == 'NAME'
        assert len(route) == 1

    @pytest.mark.parametrize('text, message', [
        ('', 'missing string'),
        ('   ', 'missing string'),
        ('AAAAA', 'invalid character'),
        ('AAA!AAA', 'invalid character'),
        ('BAAAAAA', 'invalid character'),  # extension flag without extra symbol
        ('BAAAAAAA', 'invalid character'),  # hold without extra2
        ('AAAAAAA!', 'invalid structural character'),
        ('(X)AAAAAAA', 'invalid structural character'),
        ('AAAAAAA)', 'invalid structural character'),
        ('AAAAAAA(X', 'missing closing bracket'),
        ('AAAAAAA(X(Y)', 'missing closing bracket'),
        ('AAAAAAA-(X)', 'label without a point'),
    ])
    def test_malformed_input(self, source, text, message):
        with pytest.raises(MalformedInputError) as excinfo:
            source.parse(text)
        assert str(excinfo.value) == message

    def test_help(self, source):
        assert source.help_arguments() == '<STRING>'
        assert 'legacy' in source.help_description()
