from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftPolicy


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    lateness_minutes: Optional[int] = None
    overtime_hours: Optional[Decimal] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide(self, *, now: datetime, policy: ShiftPolicy) -> StatusDecision:
        raise NotImplementedError
