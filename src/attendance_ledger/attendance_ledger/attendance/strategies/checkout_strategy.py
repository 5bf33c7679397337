from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...shifts.limits import overtime_hours
from ...shifts.model import ShiftPolicy
from .base import AttendanceStrategy, StatusDecision


class CheckoutStrategy(AttendanceStrategy):
    """Check-out is always stored as regular; overtime is reported alongside."""

    def decide(self, *, now: datetime, policy: ShiftPolicy) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.REGULAR, overtime_hours=overtime_hours(now, policy))
