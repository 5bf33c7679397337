from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.ids import IdProvider, UuidProvider
from ..core.enums import EventKind
from ..core.exceptions import FaceRejected, InvalidInput
from ..geo.geofence import GeofenceValidator
from ..geo.location import FixedLocationProvider, LocationProvider
from ..geo.model import GeoPoint
from ..shifts.service import ShiftPolicyService
from ..store.repository import AttendanceStore
from ..verification.verifier import AcceptAllVerifier, FaceVerifier
from .factory import AttendanceStrategyFactory
from .model import AttendanceEvent
from .validator import EventValidator

logger = logging.getLogger(__name__)


class AttendanceService:
    """Accepts check-in/check-out submissions.

    Order of checks: required fields and duplicates, position, geofence, face
    verifier, then classification. The duplicate check is repeated under the
    write lock right before the append, so one process never records two
    events of a kind for the same employee and day.
    """

    def __init__(
        self,
        store: AttendanceStore,
        policies: ShiftPolicyService,
        *,
        verifier: Optional[FaceVerifier] = None,
        locations: Optional[LocationProvider] = None,
        validator: Optional[EventValidator] = None,
        geofence: Optional[GeofenceValidator] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        ids: Optional[IdProvider] = None,
    ):
        self._store = store
        self._policies = policies
        self._verifier = verifier or AcceptAllVerifier()
        self._locations = locations or FixedLocationProvider()
        self._validator = validator or EventValidator()
        self._geofence = geofence or GeofenceValidator()
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._ids = ids or UuidProvider()
        self._write_lock = threading.Lock()

    @staticmethod
    def _parse_kind(kind) -> EventKind:
        try:
            return EventKind(kind)
        except ValueError:
            raise InvalidInput(f"Unknown event kind: {kind!r}")

    def submit_event(
        self,
        employee_id: Optional[str],
        kind,
        photo: Optional[bytes],
        point: Optional[GeoPoint] = None,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceEvent:
        kind = self._parse_kind(kind)
        now = now or now_local()

        employee = self._validator.require_submission(self._store.get_employees(), employee_id, photo)
        self._validator.ensure_not_duplicate(
            self._store.get_events(), employee_id=employee.employee_id, kind=kind, now=now
        )

        if point is None:
            point = self._locations.current_position()

        policy = self._policies.get_policy()
        distance = self._geofence.ensure_within(point, policy)

        if not self._verifier.verify(photo):
            logger.info("face verification rejected %s for %s", kind.value, employee.employee_id)
            raise FaceRejected("Face verification failed")

        decision = self._factory.classify(kind, now=now, policy=policy)
        event = AttendanceEvent(
            event_id=self._ids.new_id(),
            employee_id=employee.employee_id,
            employee_name=employee.name,
            kind=kind,
            timestamp=now,
            photo=photo,
            location=point,
            distance_m=distance,
            status=decision.status,
        )

        with self._write_lock:
            events = self._store.get_events()
            self._validator.ensure_not_duplicate(events, employee_id=employee.employee_id, kind=kind, now=now)
            self._store.replace_events([*events, event])

        logger.info(
            "recorded %s for %s at %s (%s, %.1fm)",
            kind.value,
            employee.employee_id,
            now.isoformat(timespec="seconds"),
            decision.status.value,
            distance,
        )
        return event

    def list_for_employee(self, employee_id: str, *, limit: int = 15):
        """Most recent events of one employee, newest first."""
        if limit < 0:
            raise InvalidInput("limit must not be negative")
        items = [e for e in self._store.get_events() if e.employee_id == employee_id]
        items.sort(key=lambda e: e.timestamp, reverse=True)
        return items[:limit]
