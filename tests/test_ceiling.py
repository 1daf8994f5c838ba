
import pytest

from ceiling import VerticalLimit, limit_to_dict, parse_limit
from errors import Context, InvalidVerticalLimit


@pytest.mark.parametrize("text, expected", [
    ("FL115", (115, 'FL', 'STD')),
    ("FL 65", (65, 'FL', 'STD')),
    ("1500 ft", (1500, 'FT', 'MSL')),
    ("1500ft", (1500, 'FT', 'MSL')),
    ("3000", (3000, 'FT', 'MSL')),
    ("2000 FT", (2000, 'FT', 'MSL')),
    ("500 ft SFC", (500, 'FT', 'GND')),
    ("SFC", (0, 'FT', 'GND')),
    (" SFC ", (0, 'FT', 'GND')),
    (1200, (1200, 'FT', 'MSL')),
])
def test_parse_limit(text, expected):
    assert parse_limit(text) == VerticalLimit(*expected)


@pytest.mark.parametrize("text", ["FL", "1000 m", "GND", "", "FL1a", "-100 ft"])
def test_parse_limit_invalid(text):
    with pytest.raises(InvalidVerticalLimit) as e:
        parse_limit(text, Context('EGD123', 4))
    assert e.value.sequence == 4
    assert "Invalid ceiling definition" in str(e.value)


def test_limit_dict():
    limit = VerticalLimit(115, 'FL', 'STD')
    assert limit_to_dict(limit) == {'value': 115, 'unit': 'FL', 'referenceDatum': 'STD'}
