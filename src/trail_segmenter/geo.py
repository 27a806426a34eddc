"""Great-circle distance between GPS fixes."""

import math

from .models import Coordinate

# Mean Earth radius
EARTH_RADIUS_M = 6_371_000


def distance(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in meters between two coordinates.

    Inputs are not range-checked. The haversine term is clamped to [0, 1] so
    rounding never raises, even for out-of-range latitudes.
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = math.radians(b.lat - a.lat)
    dlng = math.radians(b.lng - a.lng)

    hav = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    hav = min(max(hav, 0.0), 1.0)  # rounding can leave [0, 1]
    c = 2 * math.atan2(math.sqrt(hav), math.sqrt(1 - hav))
    return EARTH_RADIUS_M * c
