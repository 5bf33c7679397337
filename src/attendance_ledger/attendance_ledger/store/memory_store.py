from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.model import AttendanceEvent
from ..employees.model import Employee
from ..leaves.model import LeaveRecord
from ..shifts.model import ShiftPolicy


class InMemoryStore:
    """Process-local store. Every getter hands out a tuple snapshot."""

    def __init__(
        self,
        *,
        employees: Sequence[Employee] = (),
        events: Sequence[AttendanceEvent] = (),
        leaves: Sequence[LeaveRecord] = (),
        policy: Optional[ShiftPolicy] = None,
    ):
        self._employees = tuple(employees)
        self._events = tuple(events)
        self._leaves = tuple(leaves)
        self._policy = policy

    def get_employees(self) -> Sequence[Employee]:
        return self._employees

    def replace_employees(self, employees: Sequence[Employee]) -> None:
        self._employees = tuple(employees)

    def get_events(self) -> Sequence[AttendanceEvent]:
        return self._events

    def replace_events(self, events: Sequence[AttendanceEvent]) -> None:
        self._events = tuple(events)

    def get_leaves(self) -> Sequence[LeaveRecord]:
        return self._leaves

    def replace_leaves(self, leaves: Sequence[LeaveRecord]) -> None:
        self._leaves = tuple(leaves)

    def get_policy(self) -> Optional[ShiftPolicy]:
        return self._policy

    def replace_policy(self, policy: ShiftPolicy) -> None:
        self._policy = policy
