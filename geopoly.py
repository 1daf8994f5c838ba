
import shapely.geometry as shp
from shapely.geometry.polygon import orient

from errors import InvalidBoundary, NO_CONTEXT


def close_ring(coords):
    coords = [tuple(coord) for coord in coords]
    if len(coords) > 0 and coords[0] != coords[-1]:
        coords.append(coords[0])
    return coords


# counter-clockwise exterior and clockwise interior rings (right-hand rule)
def orient_polygon(polygon):
    return orient(polygon, sign=1.)


def assemble_polygon(coords, ctx=NO_CONTEXT):
    if len(set(tuple(coord) for coord in coords)) < 3:
        raise ctx.fail(
            InvalidBoundary,
            f"Boundary has less than 3 distinct points ({len(coords)} points)",
            coords
        )
    return orient_polygon(shp.Polygon(close_ring(coords)))
