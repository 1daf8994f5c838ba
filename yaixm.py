
import yaml

from airspace import AirspaceDefinition, GeometrySequence, ServiceRecord
from boundary import Line, Arc, Circle
from errors import Context, InvalidBoundary, UnsupportedBoundary

# boundary kind -> expected YAML value
BOUNDARY_SHAPES = {'line': list, 'arc': dict, 'circle': dict}


def _segment(boundary, ctx):
    if not isinstance(boundary, dict) or len(boundary) != 1:
        raise ctx.fail(InvalidBoundary, f"Invalid boundary definition {boundary!r}", boundary)
    kind, value = next(iter(boundary.items()))
    if kind not in BOUNDARY_SHAPES:
        raise ctx.fail(UnsupportedBoundary, f"Unsupported boundary type '{kind}'", kind)
    if not isinstance(value, BOUNDARY_SHAPES[kind]):
        raise ctx.fail(InvalidBoundary, f"Invalid {kind} boundary {value!r}", value)
    if kind == 'line':
        return Line(list(value))
    if kind == 'arc':
        return Arc(value.get('dir'), value.get('radius'), value.get('centre'), value.get('to'))
    return Circle(value.get('radius'), value.get('centre'))


def _sequence(entry, name):
    seq = entry.get('seq', entry.get('seqno'))
    ctx = Context(name, seq if seq is not None else 0)
    return GeometrySequence(
        [_segment(boundary, ctx) for boundary in entry.get('boundary') or []],
        entry.get('upper'),
        entry.get('lower'),
        seq            = seq,
        airspace_class = entry.get('class'),
        rules          = entry.get('rules')
    )


def airspace_from_dict(json_dict):
    name     = json_dict['name']
    geometry = [_sequence(entry, name) for entry in json_dict.get('geometry') or []]
    if len(geometry) == 0:
        raise Context(name, 0).fail(InvalidBoundary, "Missing geometry sequence", name)
    return AirspaceDefinition(
        name,
        json_dict.get('type'),
        geometry,
        ident          = json_dict.get('id'),
        local_type     = json_dict.get('localtype'),
        airspace_class = json_dict.get('class'),
        rules          = json_dict.get('rules')
    )


# decode the `airspace' list of a YAIXM document
def load_airspace(stream):
    document = yaml.safe_load(stream) or {}
    return [airspace_from_dict(entry) for entry in document.get('airspace') or []]


# decode the `service' list of a YAIXM service document
def load_services(stream):
    document = yaml.safe_load(stream) or {}
    return [
        ServiceRecord(entry.get('callsign'), entry.get('controls'), entry.get('frequency'))
        for entry in document.get('service') or []
    ]
