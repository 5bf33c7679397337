from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Mapping, Optional

from ..common.datetime_utils import parse_optional_date
from ..core.constants import LEAVE_MARKER, MISSING_PLACEHOLDER
from ..core.enums import AttendanceStatus
from ..shifts.limits import format_lateness, format_overtime


@dataclass(frozen=True)
class LedgerRow:
    """Read-model: one employee's attendance/leave summary for one day.

    Derived on every query, never stored.
    """

    work_date: date
    employee_id: str
    employee_name: str
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    check_in_status: Optional[AttendanceStatus] = None
    is_leave: bool = False
    leave_reason: Optional[str] = None
    lateness_minutes: Optional[int] = None
    overtime_hours: Optional[Decimal] = None

    @property
    def is_late(self) -> bool:
        return self.lateness_minutes is not None

    @property
    def is_overtime(self) -> bool:
        return self.overtime_hours is not None

    @property
    def in_display(self) -> str:
        if self.is_leave:
            return LEAVE_MARKER
        return self.check_in.strftime("%H:%M") if self.check_in else MISSING_PLACEHOLDER

    @property
    def out_display(self) -> str:
        if self.is_leave or not self.check_out:
            return MISSING_PLACEHOLDER
        return self.check_out.strftime("%H:%M")

    @property
    def lateness_display(self) -> str:
        return format_lateness(self.lateness_minutes)

    @property
    def overtime_display(self) -> str:
        return format_overtime(self.overtime_hours)

    @property
    def notes(self) -> str:
        return (self.leave_reason or "") if self.is_leave else ""

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "employee_id": self.employee_id,
            "name": self.employee_name,
            "in": self.in_display,
            "out": self.out_display,
            "status": self.check_in_status.value if self.check_in_status else None,
            "lateness": self.lateness_display,
            "is_late": self.is_late,
            "overtime": self.overtime_display,
            "is_overtime": self.is_overtime,
            "is_leave": self.is_leave,
            "leave_reason": self.leave_reason,
        }


@dataclass(frozen=True)
class LedgerFilter:
    """Inclusive date bounds and an optional employee; ``None`` means no bound.

    Bounds may be dates or ISO strings. Anything unparsable is dropped, as is
    a blank employee id.
    """

    date_start: Optional[date] = None
    date_end: Optional[date] = None
    employee_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "date_start", parse_optional_date(self.date_start))
        object.__setattr__(self, "date_end", parse_optional_date(self.date_end))
        employee_id = str(self.employee_id).strip() if self.employee_id is not None else ""
        object.__setattr__(self, "employee_id", employee_id or None)

    @classmethod
    def from_query(cls, args: Mapping) -> "LedgerFilter":
        """Build from request args (``start``, ``end``, ``employee_id``)."""
        return cls(
            date_start=args.get("start"),
            date_end=args.get("end"),
            employee_id=args.get("employee_id"),
        )

    def accepts(self, work_date: date, employee_id: str) -> bool:
        if self.date_start and work_date < self.date_start:
            return False
        if self.date_end and work_date > self.date_end:
            return False
        if self.employee_id and employee_id != self.employee_id:
            return False
        return True
