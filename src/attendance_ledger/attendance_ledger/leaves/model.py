from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LeaveRecord:
    """Domain entity: a day of leave declared by an administrator."""

    leave_id: str
    employee_id: str
    employee_name: str
    leave_date: date
    reason: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.leave_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "date": self.leave_date.isoformat(),
            "reason": self.reason,
        }
