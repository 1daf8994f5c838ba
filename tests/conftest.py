
import pytest

from airspace import AirspaceDefinition, GeometrySequence, ServiceRecord
from boundary import Arc, Circle, Line


ABERDEEN_BOUNDARY = [
    Line([" 572153N 0015835W", "572100N 0015802W", "572100N 0023356W"]),
    Arc('cw', "10 nm", "571834N 0021602W", "572153N 0015835W"),
]

BOWTIE_BOUNDARY = [
    Line(["000000N 0000000E", "010000N 0010000E", "000000N 0010000E", "010000N 0000000E"]),
]


@pytest.fixture
def aberdeen():
    return AirspaceDefinition(
        'ABERDEEN CTA', 'CTA',
        [GeometrySequence(ABERDEEN_BOUNDARY, "FL115", "1500 ft")],
        ident='aberdeen-cta', airspace_class='D'
    )


@pytest.fixture
def danger_area():
    return AirspaceDefinition(
        'EGD 701', 'D',
        [
            GeometrySequence([Circle("2 nm", "571834N 0021602W")], "5000 ft", "SFC", seq=1),
            GeometrySequence([Circle("3 nm", "571834N 0021602W")], "FL100", "5000 ft", seq=2),
        ],
        local_type='GVS', rules=['NOTAM']
    )


@pytest.fixture
def bowtie():
    return AirspaceDefinition(
        'BOWTIE', 'R', [GeometrySequence(BOWTIE_BOUNDARY, "FL50", "SFC")]
    )


@pytest.fixture
def services():
    return [
        ServiceRecord('SCOTTISH INFORMATION', ['scottish-fir'], 119.875),
        ServiceRecord('ABERDEEN APPROACH', ['aberdeen-cta', 'aberdeen-ctr'], 119.05),
    ]
