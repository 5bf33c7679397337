from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import time

from ..common.datetime_utils import format_hhmm, parse_hhmm
from ..core.constants import (
    DEFAULT_GEOFENCE_RADIUS_M,
    DEFAULT_OFFICE_LAT,
    DEFAULT_OFFICE_LNG,
    DEFAULT_WORK_END,
    DEFAULT_WORK_START,
)
from ..geo.model import GeoPoint


@dataclass(frozen=True)
class ShiftPolicy:
    """Office shift and geofence configuration.

    Mutated only by an administrator (a new instance replaces the old one);
    the engine reads it.
    """

    work_start_time: time
    work_end_time: time
    office_location: GeoPoint
    geofence_radius_m: float = DEFAULT_GEOFENCE_RADIUS_M

    @classmethod
    def default(cls) -> "ShiftPolicy":
        return cls(
            work_start_time=parse_hhmm(DEFAULT_WORK_START),
            work_end_time=parse_hhmm(DEFAULT_WORK_END),
            office_location=GeoPoint(DEFAULT_OFFICE_LAT, DEFAULT_OFFICE_LNG),
        )

    @classmethod
    def from_settings(cls, settings) -> "ShiftPolicy":
        """Build the initial policy from a settings module (see ``config/``)."""
        return cls(
            work_start_time=parse_hhmm(getattr(settings, "WORK_START_TIME", DEFAULT_WORK_START)),
            work_end_time=parse_hhmm(getattr(settings, "WORK_END_TIME", DEFAULT_WORK_END)),
            office_location=GeoPoint(
                float(getattr(settings, "OFFICE_LAT", DEFAULT_OFFICE_LAT)),
                float(getattr(settings, "OFFICE_LNG", DEFAULT_OFFICE_LNG)),
            ),
            geofence_radius_m=float(getattr(settings, "GEOFENCE_RADIUS_M", DEFAULT_GEOFENCE_RADIUS_M)),
        )

    def with_changes(self, **changes) -> "ShiftPolicy":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "work_start_time": format_hhmm(self.work_start_time),
            "work_end_time": format_hhmm(self.work_end_time),
            "office_location": self.office_location.to_dict(),
            "geofence_radius_m": self.geofence_radius_m,
        }
