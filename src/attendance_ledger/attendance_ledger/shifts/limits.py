"""Lateness and overtime arithmetic against a shift policy.

The limit is always built on the event's own calendar day at ``HH:MM:00.000``
and only a timestamp strictly after it counts.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .model import ShiftPolicy

_MICROS_PER_HOUR = Decimal(3_600_000_000)
_ONE_DECIMAL = Decimal("0.1")


def limit_for(day: date, at: time) -> datetime:
    return datetime.combine(day, at.replace(second=0, microsecond=0))


def lateness_minutes(check_in: datetime, policy: ShiftPolicy) -> Optional[int]:
    """Whole minutes (floor) after the shift start, or None when not late."""
    limit = limit_for(check_in.date(), policy.work_start_time)
    if check_in <= limit:
        return None
    return (check_in - limit) // timedelta(minutes=1)


def overtime_hours(check_out: datetime, policy: ShiftPolicy) -> Optional[Decimal]:
    """Hours after the shift end rounded half-up to one decimal, or None."""
    limit = limit_for(check_out.date(), policy.work_end_time)
    if check_out <= limit:
        return None
    micros = (check_out - limit) // timedelta(microseconds=1)
    return (Decimal(micros) / _MICROS_PER_HOUR).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


def format_lateness(minutes: Optional[int]) -> str:
    return "" if minutes is None else f"{minutes}m"


def format_overtime(hours: Optional[Decimal]) -> str:
    return "" if hours is None else f"+{hours}h"
