
from ceiling import limit_to_dict


def polygon_to_dict(polygon):
    return {
        'type':        'Polygon',
        'coordinates': [
            [list(coord) for coord in ring.coords]
            for ring in [polygon.exterior] + list(polygon.interiors)
        ],
    }



class AirspaceFeature:
    def __init__(self, name, airspace_type, airspace_class, upper, lower, polygon,
                 activated_by_notam=False, activity='NONE', remarks=None,
                 ground_service=None):
        self.name               = name
        self.type               = airspace_type
        self.airspace_class     = airspace_class
        self.upper              = upper
        self.lower              = lower
        self.polygon            = polygon
        self.activated_by_notam = activated_by_notam
        self.activity           = activity
        self.remarks            = remarks
        self.ground_service     = ground_service


    def to_dict(self):
        properties = {
            'name':             self.name,
            'type':             self.type,
            'class':            self.airspace_class,
            'upperCeiling':     limit_to_dict(self.upper),
            'lowerCeiling':     limit_to_dict(self.lower),
            'activatedByNotam': self.activated_by_notam,
            'activity':         self.activity,
        }
        # optional properties are omitted rather than set to null
        if self.remarks is not None:
            properties['remarks'] = self.remarks
        if self.ground_service is not None:
            properties['groundService'] = dict(self.ground_service)
        return {
            'type':       'Feature',
            'properties': properties,
            'geometry':   polygon_to_dict(self.polygon),
        }


    def __repr__(self):
        return f"AirspaceFeature(name={self.name!r}, type={self.type!r})"



class FeatureCollection:
    def __init__(self, features=()):
        self.features = list(features)


    def to_dict(self):
        return {
            'type':     'FeatureCollection',
            'features': [feature.to_dict() for feature in self.features],
        }


    def __len__(self):
        return len(self.features)


    def __iter__(self):
        return iter(self.features)
