
import re
from collections import namedtuple

from errors import InvalidVerticalLimit, NO_CONTEXT

VerticalLimit = namedtuple('VerticalLimit', ['value', 'unit', 'reference_datum'])

SURFACE_PATTERN      = re.compile(r'^SFC$')
FEET_PATTERN         = re.compile(r'^(\d+(?:\.\d+)?)\s*(ft|FT)?\s*(SFC)?$')
FLIGHT_LEVEL_PATTERN = re.compile(r'^FL\s*(\d+)$')


# "SFC", "1500 ft", "500 ft SFC" or "FL115"; feet are MSL unless followed by SFC
def parse_limit(text, ctx=NO_CONTEXT):
    text = str(text).strip()
    if SURFACE_PATTERN.match(text):
        return VerticalLimit(0, 'FT', 'GND')
    match = FEET_PATTERN.match(text)
    if match is not None:
        datum = 'GND' if match.group(3) else 'MSL'
        return VerticalLimit(int(round(float(match.group(1)))), 'FT', datum)
    match = FLIGHT_LEVEL_PATTERN.match(text)
    if match is not None:
        return VerticalLimit(int(match.group(1)), 'FL', 'STD')
    raise ctx.fail(InvalidVerticalLimit, f"Invalid ceiling definition '{text}'", text)


def limit_to_dict(limit):
    return {
        'value':          limit.value,
        'unit':           limit.unit,
        'referenceDatum': limit.reference_datum,
    }
