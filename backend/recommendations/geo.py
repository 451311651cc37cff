from __future__ import annotations

import math

from .models import GeoPoint

EARTH_MEAN_RADIUS_M = 6_371_008.8


def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points using the haversine formula.

    Raises ``ValueError`` if any coordinate is NaN or infinite.
    """
    coords = (a.latitude, a.longitude, b.latitude, b.longitude)
    if not all(math.isfinite(c) for c in coords):
        raise ValueError(f"Non-finite coordinate in {coords}")

    lat1, lon1, lat2, lon2 = (math.radians(c) for c in coords)
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h a hair outside [0, 1] for antipodal points
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_MEAN_RADIUS_M * math.asin(math.sqrt(h))


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    return round(distance_meters(a, b) / 1000, 2)
