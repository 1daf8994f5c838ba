
from collections import namedtuple

ServiceRecord = namedtuple('ServiceRecord', ['callsign', 'controls', 'frequency'])


class GeometrySequence:
    # one sequence yields exactly one output feature; class and rules
    # override the ones of the enclosing airspace when given
    def __init__(self, boundary, upper, lower, seq=None, airspace_class=None, rules=None):
        self.boundary       = list(boundary)
        self.upper          = upper
        self.lower          = lower
        self.seq            = seq
        self.airspace_class = airspace_class
        self.rules          = list(rules) if rules is not None else None


    @property
    def number(self):
        return self.seq if self.seq is not None else 0


    def __repr__(self):
        return (f"GeometrySequence(seq={self.seq!r}, upper={self.upper!r}, "
                f"lower={self.lower!r}, boundary={self.boundary!r})")



class AirspaceDefinition:
    def __init__(self, name, airspace_type, geometry, ident=None, local_type=None,
                 airspace_class=None, rules=None):
        assert len(geometry) > 0, f"airspace `{name}' needs at least one geometry sequence"
        self.name           = name
        self.ident          = ident
        self.type           = airspace_type
        self.local_type     = local_type
        self.airspace_class = airspace_class
        self.rules          = list(rules) if rules is not None else []
        self.geometry       = list(geometry)


    def sequence_class(self, sequence):
        if sequence.airspace_class is not None:
            return sequence.airspace_class
        return self.airspace_class


    def sequence_rules(self, sequence):
        if sequence.rules is not None:
            return sequence.rules
        return self.rules


    # feature name, suffixed when the airspace is split into several sequences
    def sequence_name(self, sequence, position):
        if len(self.geometry) < 2:
            return self.name
        return f"{self.name} {sequence.seq if sequence.seq is not None else position + 1}"


    def __repr__(self):
        return f"AirspaceDefinition(name={self.name!r}, type={self.type!r})"
