from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_M
from .model import GeoPoint


def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle (haversine) distance in meters.

    Points are put in a canonical order first so that ``distance(a, b)`` and
    ``distance(b, a)`` run the exact same float operations.
    """
    if (a.lat, a.lng) > (b.lat, b.lng):
        a, b = b, a

    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    d_phi = math.radians(b.lat - a.lat)
    d_lambda = math.radians(b.lng - a.lng)

    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points.
    h = min(max(h, 0.0), 1.0)
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(h), math.sqrt(1 - h))
