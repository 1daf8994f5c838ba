
import re
from collections import namedtuple

import geosphere
from errors import InvalidBoundary, InvalidCoordinate, UnsupportedBoundary, NO_CONTEXT
from geocoord import is_coord, parse_coord

# boundary segment kinds
Line   = namedtuple('Line'  , ['points'])
Arc    = namedtuple('Arc'   , ['dir', 'radius', 'centre', 'to'])
Circle = namedtuple('Circle', ['radius', 'centre'])

ARC_DIRECTIONS = ('cw', 'ccw')
RADIUS_PATTERN = re.compile(r'^(\d+(?:\.\d+)?)\s*(?:nm)?$', re.IGNORECASE)

DEFAULT_GEOMETRY_DETAIL = 100


def parse_radius(radius, segment, ctx=NO_CONTEXT):
    match = RADIUS_PATTERN.match(radius.strip()) if isinstance(radius, str) else None
    if match is None:
        raise ctx.fail(
            InvalidBoundary, f"Invalid radius '{radius}' in boundary {segment}", radius
        )
    return float(match.group(1)) * geosphere.NM_TO_KM


def _check_coord(token, field, segment, ctx):
    if not is_coord(token):
        raise ctx.fail(
            InvalidCoordinate, f"Invalid {field} '{token}' in boundary {segment}", token
        )
    return parse_coord(token, ctx)


def resolve_line(segment, ctx=NO_CONTEXT):
    if not segment.points:
        raise ctx.fail(InvalidBoundary, f"Empty line boundary {segment}", segment)
    return [_check_coord(point, 'coordinate', segment, ctx) for point in segment.points]


# counter-clockwise arcs are computed clockwise from `to' back to the start
# point and reversed, so points follow the authored direction of travel
def resolve_arc(segment, last_coord, detail, ctx=NO_CONTEXT):
    if last_coord is None:
        raise ctx.fail(
            InvalidBoundary,
            f"Invalid arc boundary {segment}, previous coordinate pair is missing",
            segment
        )
    if segment.dir not in ARC_DIRECTIONS:
        raise ctx.fail(
            InvalidBoundary, f"Invalid arc direction '{segment.dir}' in boundary {segment}",
            segment.dir
        )
    radius    = parse_radius(segment.radius, segment, ctx)
    centre    = _check_coord(segment.centre, 'arc centre', segment, ctx)
    end_coord = _check_coord(segment.to    , 'arc end'   , segment, ctx)

    clockwise = segment.dir == 'cw'
    start, end = (last_coord, end_coord) if clockwise else (end_coord, last_coord)
    coords = geosphere.arc(
        centre, radius,
        geosphere.bearing(centre, start), geosphere.bearing(centre, end),
        detail
    )
    return coords if clockwise else coords[::-1]


def resolve_circle(segment, detail, ctx=NO_CONTEXT):
    radius = parse_radius(segment.radius, segment, ctx)
    centre = _check_coord(segment.centre, 'circle centre', segment, ctx)
    # the polygon assembler closes the ring
    return geosphere.circle(centre, radius, detail)[:-1]


def resolve_boundary(segments, detail=DEFAULT_GEOMETRY_DETAIL, ctx=NO_CONTEXT):
    coords = []
    for segment in segments:
        if isinstance(segment, Line):
            coords += resolve_line(segment, ctx)
        elif isinstance(segment, Arc):
            last_coord = coords[-1] if coords else None
            coords += resolve_arc(segment, last_coord, detail, ctx)
        elif isinstance(segment, Circle):
            coords += resolve_circle(segment, detail, ctx)
        else:
            raise ctx.fail(
                UnsupportedBoundary, f"Unsupported boundary type '{type(segment).__name__}'",
                segment
            )
    return coords
