
from collections import namedtuple

from errors import UnmappedTaxonomy, NO_CONTEXT

Taxonomy = namedtuple('Taxonomy', ['type', 'airspace_class', 'activity'])

ALLOWED_TYPES = ('CTA', 'TMA', 'CTR', 'ATZ', 'OTHER', 'D', 'P', 'R', 'D_OTHER')
ALLOWED_LOCAL_TYPES = (
    'MATZ', 'GLIDER', 'GVS', 'HIRTA', 'LASER', 'DZ', 'NOATZ', 'UL', 'ILS', 'RMZ', 'TMZ'
)
ALLOWED_CLASSES = ('A', 'B', 'C', 'D', 'E', 'F', 'G', 'UNCLASSIFIED')

# rules that replace the raw type, first match wins
RULE_TYPE_OVERRIDES = ('TMZ', 'RMZ', 'TRA')

NO_ACTIVITY = 'NONE'

# raw type -> output type, used when a class is given
CLASS_TYPES = {
    'CTA': 'CTA',
    'TMA': 'TMA',
    'CTR': 'CTR',
    'ATZ': 'ATZ',
    'D'  : 'DANGER',
    'P'  : 'PROHIBITED',
    'R'  : 'RESTRICTED',
    'TMZ': 'TMZ',
    'RMZ': 'RMZ',
    'TRA': 'TRA',
}

# (raw type, local type) -> (output type, class, activity)
LOCAL_TYPES = {
    ('OTHER'  , 'MATZ' ): ('MATZ'                        , 'G'           , NO_ACTIVITY           ),
    ('D_OTHER', 'GLIDER'): ('GLIDING_SECTOR'              , 'UNCLASSIFIED', NO_ACTIVITY           ),
    ('D_OTHER', 'GVS'  ): ('WARNING'                      , 'UNCLASSIFIED', NO_ACTIVITY           ),
    ('D_OTHER', 'HIRTA'): ('WARNING'                      , 'UNCLASSIFIED', NO_ACTIVITY           ),
    ('D_OTHER', 'LASER'): ('WARNING'                      , 'UNCLASSIFIED', NO_ACTIVITY           ),
    ('OTHER'  , 'ILS'  ): ('WARNING'                      , 'UNCLASSIFIED', NO_ACTIVITY           ),
    ('D_OTHER', 'DZ'   ): ('AERIAL_SPORTING_RECREATIONAL', 'UNCLASSIFIED', 'PARACHUTING'         ),
    ('OTHER'  , 'GLIDER'): ('AERIAL_SPORTING_RECREATIONAL', 'UNCLASSIFIED', 'AEROCLUB_AERIAL_WORK'),
    ('OTHER'  , 'NOATZ'): ('AERIAL_SPORTING_RECREATIONAL', 'UNCLASSIFIED', 'AEROCLUB_AERIAL_WORK'),
    ('OTHER'  , 'UL'   ): ('AERIAL_SPORTING_RECREATIONAL', 'UNCLASSIFIED', 'ULM'                 ),
    ('OTHER'  , 'RMZ'  ): ('RMZ'                          , 'UNCLASSIFIED', NO_ACTIVITY           ),
    ('OTHER'  , 'TMZ'  ): ('TMZ'                          , 'UNCLASSIFIED', NO_ACTIVITY           ),
}

# danger area local types are also authored with the plain danger type
LOCAL_TYPES.update({
    ('D', local_type): mapped for (raw_type, local_type), mapped in list(LOCAL_TYPES.items())
    if raw_type == 'D_OTHER'
})

# raw type -> (output type, class), used when neither class nor local type is given
SINGLE_TYPES = {
    'ATZ' : ('ATZ'       , 'G'           ),
    'D'   : ('DANGER'    , 'UNCLASSIFIED'),
    'P'   : ('PROHIBITED', 'UNCLASSIFIED'),
    'R'   : ('RESTRICTED', 'UNCLASSIFIED'),
    'TMZ' : ('TMZ'       , 'UNCLASSIFIED'),
    'RMZ' : ('RMZ'       , 'UNCLASSIFIED'),
    'TRA' : ('TRA'       , 'UNCLASSIFIED'),
}

# output vocabulary, every table above maps into it
OUTPUT_TYPES = tuple(sorted(
    set(CLASS_TYPES.values()) |
    set(entry[0] for entry in LOCAL_TYPES.values()) |
    set(entry[0] for entry in SINGLE_TYPES.values())
))
OUTPUT_ACTIVITIES = tuple(sorted(set(entry[2] for entry in LOCAL_TYPES.values())))


def rule_override(rules):
    for rule in RULE_TYPE_OVERRIDES:
        if rule in (rules or ()):
            return rule
    return None


# (type, local type, class, rules) to an output Taxonomy
def map_taxonomy(airspace_type, local_type=None, airspace_class=None, rules=None,
                 ctx=NO_CONTEXT):
    def fail(reason, value):
        return ctx.fail(
            UnmappedTaxonomy, f"Failed to map class/type combination, {reason}", value
        )

    if airspace_type not in ALLOWED_TYPES:
        raise fail(f"the 'type' value '{airspace_type}' is not an allowed type", airspace_type)
    if local_type is not None and local_type not in ALLOWED_LOCAL_TYPES:
        raise fail(
            f"the 'localtype' value '{local_type}' is not an allowed local type", local_type
        )
    if airspace_class is not None and airspace_class not in ALLOWED_CLASSES:
        raise fail(
            f"the 'class' value '{airspace_class}' is not an allowed class", airspace_class
        )

    override = rule_override(rules)
    if override is not None:
        airspace_type = override
        local_type    = None

    if airspace_class is not None:
        mapped = CLASS_TYPES.get(airspace_type)
        if mapped is None:
            raise fail(f"the 'type' value '{airspace_type}' has no configured mapping",
                       airspace_type)
        return Taxonomy(mapped, airspace_class, NO_ACTIVITY)
    if local_type is not None:
        mapped = LOCAL_TYPES.get((airspace_type, local_type))
        if mapped is None:
            raise fail(
                f"the 'type' value '{airspace_type}' and 'localtype' value '{local_type}' "
                "have no configured mapping", (airspace_type, local_type)
            )
        return Taxonomy(*mapped)
    mapped = SINGLE_TYPES.get(airspace_type)
    if mapped is None:
        raise fail(f"the 'type' value '{airspace_type}' has no configured mapping",
                   airspace_type)
    return Taxonomy(mapped[0], mapped[1], NO_ACTIVITY)
