from __future__ import annotations

from math import asin, cos, radians, sin, sqrt

from rackfeed.models import Coordinate

EARTH_RADIUS_METERS = 6_371_008.8


def distance_meters(origin: Coordinate, target: Coordinate) -> float:
    if origin == target:
        return 0.0
    lat1 = radians(origin.latitude)
    lat2 = radians(target.latitude)
    dlat = lat2 - lat1
    dlon = radians(target.longitude - origin.longitude)

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push a marginally past 1 for near-antipodal points
    return 2 * EARTH_RADIUS_METERS * asin(sqrt(min(1.0, a)))
