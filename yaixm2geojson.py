#!/usr/bin/env python3

import argparse
import json
import logging
import sys

import yaml

from boundary import DEFAULT_GEOMETRY_DETAIL
from converter import AirspaceConverter
from errors import AirspaceError
from georepair import TopologyRepairer, DEFAULT_DEDUP_DISTANCE, COLLINEAR_STRATEGIES
from geoschema import check_schema
from yaixm import load_airspace, load_services


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Convert YAIXM airspace to GeoJSON.')
    parser.add_argument('-f', '--input-filepath', metavar='YAIXM_FILE', required=True,
                        help='YAIXM airspace file')
    parser.add_argument('-o', '--output-filepath', metavar='GEOJSON_FILE', required=True,
                        help='GeoJSON output file')
    parser.add_argument('-s', '--services', metavar='SERVICE_FILE', default=None,
                        help='YAIXM service file used to map radio services to airspaces')
    parser.add_argument('-d', '--detail', metavar='STEPS',
                        type=int, default=DEFAULT_GEOMETRY_DETAIL,
                        help=f"steps used for arcs and circles (default {DEFAULT_GEOMETRY_DETAIL})")
    parser.add_argument('-N', '--no-validate', action='store_true',
                        help='do not validate geometries')
    parser.add_argument('-F', '--fix-geometry', action='store_true',
                        help='try to fix invalid geometries (alters the airspace shape)')
    parser.add_argument('-S', '--strict-schema-validation', action='store_true',
                        help='fail if the GeoJSON does not match the output schema')
    parser.add_argument('--dedup-distance', metavar='METERS',
                        type=float, default=DEFAULT_DEDUP_DISTANCE,
                        help=f"distance below which points are merged when fixing "
                             f"(default {DEFAULT_DEDUP_DISTANCE:.0f})")
    parser.add_argument('--bearing-tolerance', metavar='DEGREES',
                        type=float, default=0.,
                        help='tolerance for detecting overlapping lines when fixing (default 0)')
    parser.add_argument('--collinear', choices=COLLINEAR_STRATEGIES, default='neighbor',
                        help='strategy for detecting overlapping lines (default neighbor)')
    return parser.parse_args(argv)


def main(argv=None):
    logging.basicConfig(level=logging.INFO)
    args = parse_args(argv)

    ###########################################################################
    # read input

    print(f"Reading airspace from {args.input_filepath} ...")

    try:
        with open(args.input_filepath) as stream:
            airspaces = load_airspace(stream)
        services = None
        if args.services is not None:
            with open(args.services) as stream:
                services = load_services(stream)
            print(f"  read {len(services)} services from {args.services}")

        #######################################################################
        # convert

        print(f"Converting {len(airspaces)} airspaces ...")

        converter = AirspaceConverter(
            validate_geometries = not args.no_validate,
            fix_geometries      = args.fix_geometry,
            geometry_detail     = args.detail,
            repairer            = TopologyRepairer(
                args.dedup_distance, args.bearing_tolerance, args.collinear
            )
        )
        warnings   = []
        collection = converter.convert_collection(airspaces, services, warnings).to_dict()
        check_schema(collection, strict=args.strict_schema_validation)
    except (AirspaceError, OSError, yaml.YAMLError) as e:
        print(str(e))
        return 1

    print(f"  created {len(collection['features'])} features with {len(warnings)} warnings")

    ###########################################################################
    # write output

    with open(args.output_filepath, 'w') as out:
        json.dump(collection, out, indent=2)

    print(f"Wrote GeoJSON to {args.output_filepath}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
