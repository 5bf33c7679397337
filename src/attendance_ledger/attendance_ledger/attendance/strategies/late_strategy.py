from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...shifts.limits import lateness_minutes
from ...shifts.model import ShiftPolicy
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide(self, *, now: datetime, policy: ShiftPolicy) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, lateness_minutes=lateness_minutes(now, policy))
