
import logging

from jsonschema import Draft7Validator

from errors import SchemaViolation
from taxonomy import ALLOWED_CLASSES, OUTPUT_ACTIVITIES, OUTPUT_TYPES

logger = logging.getLogger(__name__)

POSITION = {
    'type':     'array',
    'items':    {'type': 'number'},
    'minItems': 2,
    'maxItems': 2,
}

CEILING = {
    'type':                 'object',
    'required':             ['value', 'unit', 'referenceDatum'],
    'additionalProperties': False,
    'properties': {
        'value':          {'type': 'integer', 'minimum': 0},
        'unit':           {'enum': ['FT', 'FL']},
        'referenceDatum': {'enum': ['GND', 'MSL', 'STD']},
    },
}

FEATURE = {
    'type':     'object',
    'required': ['type', 'properties', 'geometry'],
    'properties': {
        'type': {'const': 'Feature'},
        'properties': {
            'type':     'object',
            'required': [
                'name', 'type', 'class', 'upperCeiling', 'lowerCeiling',
                'activatedByNotam', 'activity'
            ],
            'additionalProperties': False,
            'properties': {
                'name':             {'type': 'string', 'minLength': 1},
                'type':             {'enum': list(OUTPUT_TYPES)},
                'class':            {'enum': list(ALLOWED_CLASSES)},
                'upperCeiling':     CEILING,
                'lowerCeiling':     CEILING,
                'activatedByNotam': {'type': 'boolean'},
                'activity':         {'enum': list(OUTPUT_ACTIVITIES)},
                'remarks':          {'type': 'string'},
                'groundService': {
                    'type':                 'object',
                    'required':             ['callsign', 'frequency'],
                    'additionalProperties': False,
                    'properties': {
                        'callsign':  {'type': 'string'},
                        'frequency': {'type': 'string', 'pattern': r'^\d+\.\d{3}$'},
                    },
                },
            },
        },
        'geometry': {
            'type':     'object',
            'required': ['type', 'coordinates'],
            'properties': {
                'type':        {'const': 'Polygon'},
                'coordinates': {
                    'type':     'array',
                    'minItems': 1,
                    'items':    {'type': 'array', 'minItems': 4, 'items': POSITION},
                },
            },
        },
    },
}

FEATURE_COLLECTION_SCHEMA = {
    '$schema':  'http://json-schema.org/draft-07/schema#',
    'type':     'object',
    'required': ['type', 'features'],
    'properties': {
        'type':     {'const': 'FeatureCollection'},
        'features': {'type': 'array', 'items': FEATURE},
    },
}


def schema_errors(collection_dict):
    validator = Draft7Validator(FEATURE_COLLECTION_SCHEMA)
    errors    = []
    for error in validator.iter_errors(collection_dict):
        path = '/'.join(str(part) for part in error.absolute_path) or '<root>'
        errors.append(f"{path}: {error.message}")
    return sorted(errors)


# strict mode raises SchemaViolation, otherwise mismatches are logged and returned
def check_schema(collection_dict, strict=False):
    errors = schema_errors(collection_dict)
    if len(errors) > 0:
        if strict:
            raise SchemaViolation(
                f"GeoJSON does not adhere to the output schema: {'; '.join(errors)}",
                errors=errors
            )
        logger.warning(f"GeoJSON does not adhere to the output schema ({len(errors)} errors)")
    return errors
