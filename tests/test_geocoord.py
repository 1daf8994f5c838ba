
import pytest

from errors import Context, InvalidCoordinate
from geocoord import dms_to_decimal, format_coord, is_coord, parse_coord


def test_parse_coord():
    lon, lat = parse_coord("572153N 0015835W")
    assert lat == pytest.approx(57. + 21. / 60. + 53. / 3600.)
    assert lon == pytest.approx(-(1. + 58. / 60. + 35. / 3600.))


def test_parse_coord_southern_eastern_hemisphere():
    lon, lat = parse_coord("333000S 1513000E")
    assert lat == pytest.approx(-33.5)
    assert lon == pytest.approx(151.5)


def test_parse_coord_surrounding_whitespace():
    assert parse_coord(" 572153N 0015835W") == parse_coord("572153N 0015835W")


@pytest.mark.parametrize("token", [
    "5721N 0015835W",
    "572153N 15835W",
    "572153X 0015835W",
    "572153N0015835W",
    "",
    None,
])
def test_parse_coord_malformed(token):
    with pytest.raises(InvalidCoordinate):
        parse_coord(token)


@pytest.mark.parametrize("token", [
    "576153N 0015835W",
    "572160N 0015835W",
    "910000N 0015835W",
    "572153N 1810000W",
])
def test_parse_coord_out_of_range(token):
    with pytest.raises(InvalidCoordinate):
        parse_coord(token)


def test_parse_coord_error_context():
    with pytest.raises(InvalidCoordinate) as e:
        parse_coord("bogus", Context('SCOTTISH CTA', 2))
    assert e.value.airspace == 'SCOTTISH CTA'
    assert e.value.sequence == 2
    assert e.value.value    == 'bogus'
    assert "airspace 'SCOTTISH CTA' in sequence number '2'" in str(e.value)


def test_is_coord():
    assert is_coord("572153N 0015835W")
    assert not is_coord("57:21:53 N")
    assert not is_coord(12)


def test_dms_to_decimal():
    assert dms_to_decimal("57:30:00 N") == pytest.approx(57.5)
    assert dms_to_decimal("001:15:00 W") == pytest.approx(-1.25)
    with pytest.raises(ValueError):
        dms_to_decimal("57:30 N")


@pytest.mark.parametrize("token", [
    "572153N 0015835W",
    "000000N 0000000E",
    "333000S 1513000E",
    "895959N 1795959W",
])
def test_format_coord(token):
    assert format_coord(parse_coord(token)) == token
