
import re

from errors import InvalidCoordinate, NO_CONTEXT

# fixed width coordinate token, e.g. "572153N 0015835W"
COORD_PATTERN = re.compile(r'^[0-9]{6}[NS]\s+[0-9]{7}[EW]$')

# colon delimited sexagesimal angle, e.g. "57:21:53 N"
DMS_PATTERN = re.compile(
    r'^(?P<deg>\d{1,3}):(?P<min>\d{1,2}):(?P<sec>\d{1,2}(?:\.\d+)?)\s*(?P<hem>[NSEW])$'
)

HEMISPHERE_SIGN  = {'N': 1., 'S': -1., 'E': 1., 'W': -1.}
HEMISPHERE_LIMIT = {'N': 90., 'S': 90., 'E': 180., 'W': 180.}


def is_coord(token):
    return isinstance(token, str) and COORD_PATTERN.match(token.strip()) is not None


# convert a sexagesimal angle to signed decimal degrees
def dms_to_decimal(dms):
    match = DMS_PATTERN.match(dms.strip())
    if match is None:
        raise ValueError(f"malformed sexagesimal angle `{dms}'")
    deg = int(match['deg'])
    mnt = int(match['min'])
    sec = float(match['sec'])
    hem = match['hem']
    if mnt >= 60 or sec >= 60.:
        raise ValueError(f"minutes and seconds of `{dms}' must be below 60")
    value = deg + mnt / 60. + sec / 3600.
    if value > HEMISPHERE_LIMIT[hem]:
        raise ValueError(f"angle `{dms}' exceeds {HEMISPHERE_LIMIT[hem]:.0f} degrees")
    return HEMISPHERE_SIGN[hem] * value


def _format_latitude(token):
    return f"{token[0:2]}:{token[2:4]}:{token[4:6]} {token[6:7]}"


def _format_longitude(token):
    return f"{token[0:3]}:{token[3:5]}:{token[5:7]} {token[7:8]}"


# "DDMMSSN DDDMMSSE" token to (lon, lat)
def parse_coord(token, ctx=NO_CONTEXT):
    if not is_coord(token):
        raise ctx.fail(InvalidCoordinate, f"Invalid coordinate '{token}'", token)
    lat_token, lon_token = token.split()
    try:
        lat = dms_to_decimal(_format_latitude(lat_token))
        lon = dms_to_decimal(_format_longitude(lon_token))
    except ValueError as e:
        raise ctx.fail(
            InvalidCoordinate, f"Failed to transform coordinate '{token}' ({e})", token
        ) from e
    return (lon, lat)


# split an absolute angle into whole degrees, minutes and seconds
def decimal_to_dms(angle):
    total = int(round(abs(angle) * 3600.))
    return total // 3600, (total // 60) % 60, total % 60


# inverse of parse_coord, formats a coordinate back into a fixed width token
# so parsed tokens can be checked for a lossless round trip
def format_coord(coord):
    lon, lat = coord
    lat_deg, lat_min, lat_sec = decimal_to_dms(lat)
    lon_deg, lon_min, lon_sec = decimal_to_dms(lon)
    return (
        f"{lat_deg:02d}{lat_min:02d}{lat_sec:02d}{'S' if lat < 0. else 'N'} "
        f"{lon_deg:03d}{lon_min:02d}{lon_sec:02d}{'W' if lon < 0. else 'E'}"
    )
