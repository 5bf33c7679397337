from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import AttendanceStatus, EventKind
from ..geo.model import GeoPoint


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one check-in or check-out.

    ``distance_m`` and ``status`` are computed once, from the policy in effect
    at submission, and never recomputed. ``photo`` is an opaque blob.
    """

    event_id: str
    employee_id: str
    employee_name: str
    kind: EventKind
    timestamp: datetime
    photo: bytes
    location: GeoPoint
    distance_m: float
    status: AttendanceStatus

    @property
    def work_date(self) -> date:
        return self.timestamp.date()

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "kind": self.kind.value,
            "timestamp": self.timestamp.isoformat(),
            "location": self.location.to_dict(),
            "distance_m": round(self.distance_m, 1),
            "status": self.status.value,
        }
