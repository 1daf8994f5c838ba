
from collections import namedtuple

import networkx as nx
import shapely.geometry as shp
from shapely.ops import unary_union
from shapely.validation import explain_validity

TopologyReport = namedtuple('TopologyReport', ['is_valid', 'is_simple', 'point', 'reason'])


def is_valid(polygon):
    return polygon.is_valid


def is_simple(polygon):
    return all(ring.is_simple for ring in _rings(polygon))


def _rings(polygon):
    yield polygon.exterior
    for interior in polygon.interiors:
        yield interior


# graph of the linework noded at every intersection, overlapping edges merge
def ring_graph(polygon):
    lines = unary_union([shp.LineString(ring.coords) for ring in _rings(polygon)])
    graph = nx.Graph()
    for line in getattr(lines, 'geoms', [lines]):
        coords = list(line.coords)
        graph.add_edges_from(
            (node1, node2) for node1, node2 in zip(coords, coords[1:]) if node1 != node2
        )
    return graph


# every node of a consistent ring has exactly one incoming and one outgoing
# edge; crossings, touching vertices and spurs break that
def inconsistent_nodes(polygon):
    graph = ring_graph(polygon)
    return [node for node, degree in graph.degree() if degree != 2]


def find_inconsistent_node(polygon):
    nodes = inconsistent_nodes(polygon)
    return nodes[0] if len(nodes) > 0 else None


def check(polygon):
    valid  = is_valid(polygon)
    simple = is_simple(polygon)
    if valid and simple:
        return TopologyReport(True, True, None, None)
    return TopologyReport(
        valid, simple, find_inconsistent_node(polygon), explain_validity(polygon)
    )
