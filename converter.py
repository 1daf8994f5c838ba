
import logging
from collections import namedtuple

import geotopo
from boundary import resolve_boundary, DEFAULT_GEOMETRY_DETAIL
from ceiling import parse_limit
from errors import Context, GeometryInvalid
from geofeature import AirspaceFeature, FeatureCollection
from georepair import TopologyRepairer
from geopoly import assemble_polygon
from taxonomy import map_taxonomy

logger = logging.getLogger(__name__)

# recoverable outcome, reported next to the converted features
ConversionWarning = namedtuple('ConversionWarning', ['airspace', 'sequence', 'message'])


def format_frequency(frequency):
    return f"{float(frequency):.3f}"


# returns a (service, warning) pair, a malformed service record yields a
# warning message instead of an error
def find_ground_service(ident, services):
    try:
        for service in services:
            controls = service.controls
            if isinstance(controls, str):
                controls = [controls]
            if any(ident in control for control in controls or ()):
                return {
                    'callsign':  service.callsign,
                    'frequency': format_frequency(service.frequency),
                }, None
    except (TypeError, ValueError, AttributeError) as e:
        return None, f"Failed to map ground station services ({e})"
    return None, None



class AirspaceConverter:
    def __init__(self, validate_geometries=True, fix_geometries=False,
                 geometry_detail=DEFAULT_GEOMETRY_DETAIL, repairer=None):
        assert isinstance(geometry_detail, int) and geometry_detail > 2, (
            "geometry_detail must be an integer larger than 2")
        self.validate_geometries = validate_geometries
        self.fix_geometries      = fix_geometries
        self.geometry_detail     = geometry_detail
        self.repairer            = repairer if repairer is not None else TopologyRepairer()


    def create_geometry(self, sequence, ctx):
        coords  = resolve_boundary(sequence.boundary, self.geometry_detail, ctx)
        polygon = assemble_polygon(coords, ctx)
        if self.fix_geometries:
            polygon = self.repairer.repair(polygon, ctx)
        if self.validate_geometries:
            report = geotopo.check(polygon)
            if not report.is_valid:
                message = "Invalid geometry"
                if report.point is not None:
                    message += f", self intersection at {list(report.point)}"
                raise ctx.fail(
                    GeometryInvalid, message, polygon,
                    point=report.point, reason=report.reason
                )
        return polygon


    def create_feature(self, airspace, sequence, position, services=None, warnings=None):
        ctx   = Context(airspace.name, sequence.number)
        rules = airspace.sequence_rules(sequence)
        taxonomy = map_taxonomy(
            airspace.type, airspace.local_type, airspace.sequence_class(sequence), rules, ctx
        )
        upper   = parse_limit(sequence.upper, ctx)
        lower   = parse_limit(sequence.lower, ctx)
        polygon = self.create_geometry(sequence, ctx)

        ground_service = None
        if airspace.ident is not None and services is not None:
            ground_service, message = find_ground_service(airspace.ident, services)
            if message is not None:
                logger.warning(f"{message} for {ctx}")
                if warnings is not None:
                    warnings.append(ConversionWarning(ctx.airspace, ctx.sequence, message))

        return AirspaceFeature(
            airspace.sequence_name(sequence, position),
            taxonomy.type,
            taxonomy.airspace_class,
            upper,
            lower,
            polygon,
            activated_by_notam = 'NOTAM' in rules,
            activity           = taxonomy.activity,
            remarks            = ', '.join(rules) if len(rules) > 0 else None,
            ground_service     = ground_service
        )


    # one feature per geometry sequence in input order, recoverable problems
    # are appended to `warnings' when a list is given
    def convert(self, airspaces, services=None, warnings=None):
        features = []
        for airspace in airspaces:
            for position, sequence in enumerate(airspace.geometry):
                features.append(
                    self.create_feature(airspace, sequence, position, services, warnings)
                )
        return features


    def convert_collection(self, airspaces, services=None, warnings=None):
        return FeatureCollection(self.convert(airspaces, services, warnings))
