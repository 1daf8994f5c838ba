
from collections import namedtuple

class AirspaceError(ValueError):
    def __init__(self, message, airspace=None, sequence=None, value=None):
        super().__init__(message)
        self.airspace = airspace
        self.sequence = sequence
        self.value    = value


class InvalidCoordinate(AirspaceError):
    pass


class InvalidBoundary(AirspaceError):
    pass


class UnsupportedBoundary(AirspaceError):
    pass


class UnmappedTaxonomy(AirspaceError):
    pass


class InvalidVerticalLimit(AirspaceError):
    pass


class GeometryInvalid(AirspaceError):
    def __init__(self, message, point=None, reason=None, **kwargs):
        super().__init__(message, **kwargs)
        self.point  = point
        self.reason = reason


class RepairFailed(AirspaceError):
    def __init__(self, message, original=None, attempted=None, **kwargs):
        super().__init__(message, **kwargs)
        self.original  = original
        self.attempted = attempted


class SchemaViolation(AirspaceError):
    def __init__(self, message, errors=(), **kwargs):
        super().__init__(message, **kwargs)
        self.errors = list(errors)


# identifies the geometry sequence that is being processed, used to locate a
# defect in the source document
class Context(namedtuple('Context', ['airspace', 'sequence'])):
    __slots__ = ()

    def __str__(self):
        return f"airspace '{self.airspace}' in sequence number '{self.sequence}'"


    def fail(self, error_cls, message, value=None, **kwargs):
        return error_cls(
            f"{message} for {self}", airspace=self.airspace,
            sequence=self.sequence, value=value, **kwargs
        )


NO_CONTEXT = Context(None, 0)
