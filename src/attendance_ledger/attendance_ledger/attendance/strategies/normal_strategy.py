from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftPolicy
from .base import AttendanceStrategy, StatusDecision


class OnTimeStrategy(AttendanceStrategy):
    """Check-in at or before the shift start."""

    def decide(self, *, now: datetime, policy: ShiftPolicy) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)
