
import numpy as np
from geographiclib.geodesic import Geodesic

# mean earth radius in kilometers
EARTH_RADIUS = 6371.0088

NM_TO_KM = 1.852

# geodesics on a sphere of the mean earth radius
GEODESIC = Geodesic(EARTH_RADIUS * 1000., 0.)


# initial bearing from coord1 to coord2 in degrees [-180, 180]
def bearing(coord1, coord2):
    return GEODESIC.Inverse(coord1[1], coord1[0], coord2[1], coord2[0])['azi1']


# distance in kilometers
def distance(coord1, coord2):
    return GEODESIC.Inverse(coord1[1], coord1[0], coord2[1], coord2[0])['s12'] / 1000.


# project points from a center at the given distance (km) along each bearing
def destinations(center, radius, bearings):
    lon, lat = center
    points   = []
    for azimuth in bearings:
        pos = GEODESIC.Direct(lat, lon, float(azimuth), radius * 1000.)
        points.append((float(pos['lon2']), float(pos['lat2'])))
    return points


# counter-clockwise ring of steps + 1 points, the last one repeating the first
def circle(center, radius, steps):
    assert isinstance(steps, int) and steps > 2, (
        "steps must be an integer larger than 2")
    coords = destinations(
        center, radius, np.linspace(0., -360., steps, endpoint=False)
    )
    return coords + coords[:1]


# arc running clockwise from bearing1 to bearing2 in steps + 1 points, equal
# bearings yield the full circle
def arc(center, radius, bearing1, bearing2, steps):
    assert isinstance(steps, int) and steps > 0, (
        "steps must be a positive integer")
    angle1 = bearing1 % 360.
    angle2 = bearing2 % 360.
    if angle1 == angle2:
        return circle(center, radius, steps)
    if angle2 < angle1:
        angle2 += 360.
    return destinations(center, radius, np.linspace(angle1, angle2, steps + 1))


# geodesic area of a ring in square kilometers, regardless of its winding
def ring_area(coords):
    ring = [tuple(coord) for coord in coords]
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring = ring[:-1]
    if len(ring) < 3:
        return 0.
    polygon = GEODESIC.Polygon()
    for lon, lat in ring:
        polygon.AddPoint(lat, lon)
    _, _, area = polygon.Compute(False, True)
    return abs(area) / 1e6


def polygon_area(polygon):
    area = ring_area(polygon.exterior.coords)
    for interior in polygon.interiors:
        area -= ring_area(interior.coords)
    return area
