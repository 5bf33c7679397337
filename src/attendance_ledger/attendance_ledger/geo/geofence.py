from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.exceptions import GeofenceViolation
from ..shifts.model import ShiftPolicy
from .geomath import distance_meters
from .model import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeofenceResult:
    distance: float
    ok: bool


class GeofenceValidator:
    """Circular fence around the office location of the shift policy."""

    def validate(self, point: GeoPoint, policy: ShiftPolicy) -> GeofenceResult:
        distance = distance_meters(point, policy.office_location)
        return GeofenceResult(distance=distance, ok=distance <= policy.geofence_radius_m)

    def ensure_within(self, point: GeoPoint, policy: ShiftPolicy) -> float:
        """Return the measured distance, or raise ``GeofenceViolation``."""
        result = self.validate(point, policy)
        if not result.ok:
            logger.info("geofence rejected point %s at %.1fm", point, result.distance)
            raise GeofenceViolation(result.distance, policy.geofence_radius_m)
        return result.distance
