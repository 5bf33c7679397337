"""Dashboard views: today's activity and the month calendar."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List

from ..attendance.model import AttendanceEvent
from ..core.enums import AttendanceStatus, EventKind
from ..leaves.model import LeaveRecord
from .holidays import Holiday


@dataclass(frozen=True)
class DailyOverview:
    day: date
    events: List[AttendanceEvent] = field(default_factory=list)
    on_time: int = 0
    late: int = 0

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "on_time": self.on_time,
            "late": self.late,
            "events": [e.to_dict() for e in self.events],
        }


@dataclass(frozen=True)
class CalendarDay:
    day: date
    is_weekend: bool
    holidays: List[Holiday] = field(default_factory=list)
    leaves: List[LeaveRecord] = field(default_factory=list)
    check_ins: List[AttendanceEvent] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "is_weekend": self.is_weekend,
            "holidays": [h.to_dict() for h in self.holidays],
            "leaves": [lv.to_dict() for lv in self.leaves],
            "check_ins": [e.to_dict() for e in self.check_ins],
        }


def daily_overview(events: Iterable[AttendanceEvent], day: date) -> DailyOverview:
    todays = sorted((e for e in events if e.work_date == day), key=lambda e: e.timestamp)
    check_ins = [e for e in todays if e.kind == EventKind.CHECK_IN]
    return DailyOverview(
        day=day,
        events=todays,
        on_time=sum(1 for e in check_ins if e.status == AttendanceStatus.ON_TIME),
        late=sum(1 for e in check_ins if e.status == AttendanceStatus.LATE),
    )


def month_calendar(
    events: Iterable[AttendanceEvent],
    leaves: Iterable[LeaveRecord],
    year: int,
    month: int,
    holidays: Iterable[Holiday] = (),
) -> List[CalendarDay]:
    events = list(events)
    leaves = list(leaves)
    holidays = list(holidays)
    _, last_day = calendar.monthrange(year, month)

    days = []
    for n in range(1, last_day + 1):
        d = date(year, month, n)
        days.append(
            CalendarDay(
                day=d,
                is_weekend=d.weekday() >= 5,
                holidays=[h for h in holidays if h.holiday_date == d],
                leaves=[lv for lv in leaves if lv.leave_date == d],
                check_ins=[e for e in events if e.kind == EventKind.CHECK_IN and e.work_date == d],
            )
        )
    return days
