from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..attendance.model import AttendanceEvent
from ..employees.model import Employee
from ..leaves.model import LeaveRecord
from ..shifts.model import ShiftPolicy


class AttendanceStore(Protocol):
    """Persistence collaborator owning the four entity collections.

    Collections are read and replaced whole; no incremental/diff operations.
    """

    def get_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def replace_employees(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError

    def get_events(self) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def replace_events(self, events: Sequence[AttendanceEvent]) -> None:
        raise NotImplementedError

    def get_leaves(self) -> Sequence[LeaveRecord]:
        raise NotImplementedError

    def replace_leaves(self, leaves: Sequence[LeaveRecord]) -> None:
        raise NotImplementedError

    def get_policy(self) -> Optional[ShiftPolicy]:
        raise NotImplementedError

    def replace_policy(self, policy: ShiftPolicy) -> None:
        raise NotImplementedError
