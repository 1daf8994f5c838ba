
import logging
import math

import shapely.geometry as shp
from shapely.errors import ShapelyError
from shapely.ops import polygonize, unary_union

import geosphere
import geotopo
from errors import RepairFailed, NO_CONTEXT
from geopoly import close_ring, orient_polygon

logger = logging.getLogger(__name__)

DEFAULT_DEDUP_DISTANCE = 200. # meters
LEGACY_DEDUP_DISTANCE  = 1.   # meters
COLLINEAR_STRATEGIES   = ('neighbor', 'sequential')

# bearings computed from floats are never exactly opposite
BEARING_EPSILON = 1e-9


# best-effort repair: drop near duplicates, drop there and back traversals,
# split into simple loops and keep the largest, else use the envelope
class TopologyRepairer:
    def __init__(self, dedup_distance=DEFAULT_DEDUP_DISTANCE, bearing_tolerance=0.,
                 collinear='neighbor'):
        assert isinstance(dedup_distance, (int, float)) and dedup_distance >= 0, (
            "dedup_distance must be a non-negative number of meters")
        assert isinstance(bearing_tolerance, (int, float)) and 0 <= bearing_tolerance < 180, (
            "bearing_tolerance must be a number of degrees in [0, 180)")
        assert collinear in COLLINEAR_STRATEGIES, (
            f"collinear must be one of {', '.join(COLLINEAR_STRATEGIES)}")
        self.dedup_distance    = dedup_distance
        self.bearing_tolerance = bearing_tolerance
        self.collinear         = collinear


    def _is_opposite(self, bearing1, bearing2):
        delta = abs((bearing1 - bearing2 + 180.) % 360. - 180.)
        return 180. - delta <= self.bearing_tolerance + BEARING_EPSILON


    # drop points within dedup_distance of an already kept point, the first
    # and the last point are always kept
    def remove_duplicates(self, coords):
        if len(coords) < 3:
            return list(coords)
        limit = self.dedup_distance / 1000.
        kept  = [coords[0]]
        for coord in coords[1:-1]:
            if all(geosphere.distance(other, coord) >= limit for other in kept):
                kept.append(coord)
        kept.append(coords[-1])
        return kept


    # drop a point when it lies on a segment formed by two earlier
    # consecutive points, i.e. when the ring doubles back over itself
    def remove_intermediate_points(self, coords):
        kept = [coords[0]] if len(coords) > 0 else []
        for idx in range(1, len(coords) - 1):
            coord = coords[idx]
            on_segment = any(
                coord != coords[prev] and coord != coords[prev + 1] and
                self._is_opposite(
                    geosphere.bearing(coord, coords[prev]),
                    geosphere.bearing(coord, coords[prev + 1])
                ) for prev in range(idx - 1)
            )
            if not on_segment:
                kept.append(coord)
        if len(coords) > 1:
            kept.append(coords[-1])
        return kept


    # walk the ring and drop every point where the traversal reverses, i.e.
    # where the direction of arrival is opposite to the direction of departure
    def remove_overlap_points(self, coords):
        if len(coords) < 3:
            return list(coords)
        kept = [coords[0]]
        for coord, next_coord in zip(coords[1:-1], coords[2:]):
            if coord == kept[-1] or coord == next_coord:
                kept.append(coord)
                continue
            arrival   = geosphere.bearing(coord, kept[-1]) + 180.
            departure = geosphere.bearing(coord, next_coord)
            if not self._is_opposite(arrival, departure):
                kept.append(coord)
        kept.append(coords[-1])
        return kept


    def remove_collinear(self, coords):
        if self.collinear == 'sequential':
            return self.remove_overlap_points(coords)
        return self.remove_intermediate_points(coords)


    @staticmethod
    def unkink(coords):
        line  = shp.LineString(close_ring(coords))
        loops = list(polygonize(unary_union(line)))
        if len(loops) == 0:
            raise ValueError("ring does not enclose any area")
        return loops


    @staticmethod
    def largest(polygons):
        assert len(polygons) > 0, "polygons must contain at least one polygon"
        return max(polygons, key=geosphere.polygon_area)


    @staticmethod
    def envelope(coords):
        return shp.box(*shp.MultiPoint(coords).bounds)


    def fix(self, polygon):
        original = list(polygon.exterior.coords)
        coords   = self.remove_duplicates(original)
        try:
            coords = self.remove_collinear(coords)
            loops  = self.unkink(coords)
            logger.debug(f"unkinked ring into {len(loops)} simple polygons")
            fixed  = self.largest(loops)
        except (ValueError, ShapelyError) as e:
            logger.debug(f"unkinking failed ({e}), using envelope")
            fixed = self.envelope(original)
        return orient_polygon(shp.Polygon(fixed.exterior.coords))


    def repair(self, polygon, ctx=NO_CONTEXT):
        if geotopo.is_valid(polygon) and geotopo.is_simple(polygon):
            return polygon
        try:
            fixed = self.fix(polygon)
        except (ValueError, ShapelyError) as e:
            raise ctx.fail(
                RepairFailed, f"Failed to create fixed geometry ({e})",
                original=polygon, attempted=None
            ) from e
        if fixed.is_empty or not geotopo.is_valid(fixed):
            raise ctx.fail(
                RepairFailed, "Failed to create fixed geometry, repaired polygon is invalid",
                original=polygon, attempted=fixed
            )
        return fixed
