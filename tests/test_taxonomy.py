
import pytest

from errors import Context, UnmappedTaxonomy
from taxonomy import (
    ALLOWED_CLASSES, ALLOWED_TYPES, CLASS_TYPES, LOCAL_TYPES, OUTPUT_ACTIVITIES,
    OUTPUT_TYPES, SINGLE_TYPES, Taxonomy, map_taxonomy, rule_override
)


@pytest.mark.parametrize("raw, expected", [
    (('CTR', None, 'D'), ('CTR', 'D', 'NONE')),
    (('D', None, 'G'), ('DANGER', 'G', 'NONE')),
    (('D', 'GVS', None), ('WARNING', 'UNCLASSIFIED', 'NONE')),
    (('D_OTHER', 'DZ', None), ('AERIAL_SPORTING_RECREATIONAL', 'UNCLASSIFIED', 'PARACHUTING')),
    (('OTHER', 'MATZ', None), ('MATZ', 'G', 'NONE')),
    (('OTHER', 'UL', None), ('AERIAL_SPORTING_RECREATIONAL', 'UNCLASSIFIED', 'ULM')),
    (('ATZ', None, None), ('ATZ', 'G', 'NONE')),
    (('P', None, None), ('PROHIBITED', 'UNCLASSIFIED', 'NONE')),
])
def test_map_taxonomy(raw, expected):
    assert map_taxonomy(*raw) == Taxonomy(*expected)


def test_class_takes_precedence_over_local_type():
    assert map_taxonomy('D', 'GVS', 'E') == Taxonomy('DANGER', 'E', 'NONE')


def test_rule_overrides_type():
    assert map_taxonomy('OTHER', 'MATZ', rules=['NOTAM', 'TMZ']) == \
        Taxonomy('TMZ', 'UNCLASSIFIED', 'NONE')
    assert map_taxonomy('CTA', airspace_class='E', rules=['RMZ']) == Taxonomy('RMZ', 'E', 'NONE')
    assert rule_override(['TRA', 'TMZ']) == 'TMZ'
    assert rule_override(['NOTAM']) is None
    assert rule_override(None) is None


def test_tables_are_total():
    for airspace_type, mapped in CLASS_TYPES.items():
        if airspace_type in ALLOWED_TYPES:
            assert map_taxonomy(airspace_type, airspace_class='C') == Taxonomy(mapped, 'C', 'NONE')
    for (airspace_type, local_type), mapped in LOCAL_TYPES.items():
        assert map_taxonomy(airspace_type, local_type) == Taxonomy(*mapped)
    for airspace_type, (mapped, airspace_class) in SINGLE_TYPES.items():
        if airspace_type in ALLOWED_TYPES:
            assert map_taxonomy(airspace_type) == Taxonomy(mapped, airspace_class, 'NONE')


def test_output_vocabulary():
    for mapped in LOCAL_TYPES.values():
        assert mapped[0] in OUTPUT_TYPES
        assert mapped[1] in ALLOWED_CLASSES
        assert mapped[2] in OUTPUT_ACTIVITIES
    assert 'NONE' in OUTPUT_ACTIVITIES


@pytest.mark.parametrize("raw", [
    ('XYZ', None, None),
    ('CTA', 'FOO', None),
    ('CTA', None, 'Z'),
    ('OTHER', None, None),
    ('OTHER', None, 'G'),
    ('CTA', 'GVS', None),
    ('D_OTHER', None, None),
])
def test_unmapped(raw):
    with pytest.raises(UnmappedTaxonomy) as e:
        map_taxonomy(*raw, ctx=Context('EGRU001', 1))
    assert e.value.airspace == 'EGRU001'
    assert "Failed to map class/type combination" in str(e.value)
