from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.ids import IdProvider, UuidProvider
from ..core.constants import DEFAULT_LEAVE_REASON
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, InvalidInput
from ..store.repository import AttendanceStore
from .model import LeaveRecord

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, store: AttendanceStore, *, ids: Optional[IdProvider] = None):
        self._store = store
        self._ids = ids or UuidProvider()

    def list_leaves(self) -> Sequence[LeaveRecord]:
        return self._store.get_leaves()

    def add_leave(self, *, current_role: Role, employee_id: str, leave_date, reason: str = "") -> LeaveRecord:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin access required")

        day: Optional[date] = parse_optional_date(leave_date)
        if not employee_id or day is None:
            raise InvalidInput("Employee and date are required")

        employee = next((e for e in self._store.get_employees() if e.employee_id == employee_id), None)
        if employee is None:
            raise InvalidInput("Employee not found")

        leave = LeaveRecord(
            leave_id=self._ids.new_id(),
            employee_id=employee.employee_id,
            employee_name=employee.name,
            leave_date=day,
            reason=(reason or "").strip() or DEFAULT_LEAVE_REASON,
        )
        self._store.replace_leaves([*self._store.get_leaves(), leave])
        logger.info("leave added: %s on %s", employee.employee_id, day.isoformat())
        return leave

    def delete_leave(self, *, current_role: Role, leave_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin access required")

        leaves = self._store.get_leaves()
        remaining = [lv for lv in leaves if lv.leave_id != leave_id]
        if len(remaining) == len(leaves):
            raise InvalidInput("Leave record not found")
        self._store.replace_leaves(remaining)
        logger.info("leave deleted: %s", leave_id)
