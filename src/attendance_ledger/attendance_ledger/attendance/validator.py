from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..core.enums import EventKind
from ..core.exceptions import DuplicateEvent, InvalidInput
from ..employees.model import Employee
from .model import AttendanceEvent


class EventValidator:
    """Submission-time checks, run before any external call.

    The duplicate check is read-then-decide: callers must serialise the
    check and the append (see ``AttendanceService``).
    """

    def __init__(self, *, reject_duplicates: bool = True):
        self._reject_duplicates = bool(reject_duplicates)

    def require_submission(
        self,
        employees: Sequence[Employee],
        employee_id: Optional[str],
        photo: Optional[bytes],
    ) -> Employee:
        if not employee_id or not str(employee_id).strip() or not photo:
            raise InvalidInput("Missing identity or photo")

        for employee in employees:
            if employee.employee_id == str(employee_id).strip():
                return employee
        raise InvalidInput("Unknown employee")

    def ensure_not_duplicate(
        self,
        events: Iterable[AttendanceEvent],
        *,
        employee_id: str,
        kind: EventKind,
        now: datetime,
    ) -> None:
        if not self._reject_duplicates:
            return

        today = now.date()
        for e in events:
            if e.employee_id == employee_id and e.kind == kind and e.work_date == today:
                label = "checked in" if kind == EventKind.CHECK_IN else "checked out"
                raise DuplicateEvent(f"Already {label} today")
