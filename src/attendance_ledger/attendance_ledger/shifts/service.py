from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_float, require_hhmm
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, InvalidInput
from ..geo.model import GeoPoint
from ..store.repository import AttendanceStore
from .model import ShiftPolicy

logger = logging.getLogger(__name__)


class ShiftPolicyService:
    def __init__(self, store: AttendanceStore, *, fallback: Optional[ShiftPolicy] = None):
        self._store = store
        self._fallback = fallback or ShiftPolicy.default()

    def get_policy(self) -> ShiftPolicy:
        """Policy in effect now: the stored one, else the configured default."""
        return self._store.get_policy() or self._fallback

    def update_policy(
        self,
        *,
        current_role: Role,
        work_start_time: Optional[str] = None,
        work_end_time: Optional[str] = None,
        office_lat=None,
        office_lng=None,
        geofence_radius_m=None,
    ) -> ShiftPolicy:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin access required")

        policy = self.get_policy()
        changes = {}
        if work_start_time is not None:
            changes["work_start_time"] = require_hhmm(work_start_time, "Work start time")
        if work_end_time is not None:
            changes["work_end_time"] = require_hhmm(work_end_time, "Work end time")
        if office_lat is not None or office_lng is not None:
            changes["office_location"] = GeoPoint(
                require_float(office_lat if office_lat is not None else policy.office_location.lat, "Office latitude"),
                require_float(office_lng if office_lng is not None else policy.office_location.lng, "Office longitude"),
            )
        if geofence_radius_m is not None:
            radius = require_float(geofence_radius_m, "Geofence radius")
            if radius <= 0:
                raise InvalidInput("Geofence radius must be positive")
            changes["geofence_radius_m"] = radius

        updated = policy.with_changes(**changes)
        self._store.replace_policy(updated)
        logger.info("shift policy updated: %s", updated.to_dict())
        return updated
