from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import EventKind
from ..shifts.limits import limit_for
from ..shifts.model import ShiftPolicy
from .strategies.base import AttendanceStrategy, StatusDecision
from .strategies.checkout_strategy import CheckoutStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import OnTimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, now: datetime, policy: ShiftPolicy) -> AttendanceStrategy:
        if now > limit_for(now.date(), policy.work_start_time):
            return LateStrategy()
        return OnTimeStrategy()

    def for_checkout(self, *, now: datetime, policy: ShiftPolicy) -> AttendanceStrategy:
        return CheckoutStrategy()

    def classify(self, kind: EventKind, *, now: datetime, policy: ShiftPolicy) -> StatusDecision:
        if kind == EventKind.CHECK_IN:
            strategy = self.for_checkin(now=now, policy=policy)
        else:
            strategy = self.for_checkout(now=now, policy=policy)
        return strategy.decide(now=now, policy=policy)
