from datetime import date, datetime, time
from decimal import Decimal

import pytest

from src.attendance_ledger.attendance_ledger.attendance.model import AttendanceEvent
from src.attendance_ledger.attendance_ledger.core.enums import AttendanceStatus, EventKind
from src.attendance_ledger.attendance_ledger.geo.model import GeoPoint
from src.attendance_ledger.attendance_ledger.leaves.model import LeaveRecord
from src.attendance_ledger.attendance_ledger.ledger.aggregator import LedgerAggregator
from src.attendance_ledger.attendance_ledger.ledger.model import LedgerFilter
from src.attendance_ledger.attendance_ledger.shifts.model import ShiftPolicy

POLICY = ShiftPolicy(
    work_start_time=time(9, 0),
    work_end_time=time(18, 0),
    office_location=GeoPoint(0.0, 0.0),
    geofence_radius_m=100.0,
)

_seq = iter(range(1, 10_000))


def ev(employee_id: str, kind: str, ts: datetime, status: AttendanceStatus = None) -> AttendanceEvent:
    kind = EventKind(kind)
    if status is None:
        status = AttendanceStatus.ON_TIME if kind == EventKind.CHECK_IN else AttendanceStatus.REGULAR
    return AttendanceEvent(
        event_id=f"ev{next(_seq)}",
        employee_id=employee_id,
        employee_name=employee_id.upper(),
        kind=kind,
        timestamp=ts,
        photo=b"",
        location=GeoPoint(0.0, 0.0),
        distance_m=0.0,
        status=status,
    )


def leave(employee_id: str, day: date, reason: str = "Sick") -> LeaveRecord:
    return LeaveRecord(
        leave_id=f"lv{next(_seq)}",
        employee_id=employee_id,
        employee_name=employee_id.upper(),
        leave_date=day,
        reason=reason,
    )


def test_empty_input_gives_empty_ledger():
    assert LedgerAggregator().aggregate([], [], POLICY) == []


def test_earliest_check_in_and_latest_check_out_win():
    events = [
        ev("e1", "check-in", datetime(2025, 3, 3, 9, 20), AttendanceStatus.LATE),
        ev("e1", "check-in", datetime(2025, 3, 3, 8, 50), AttendanceStatus.ON_TIME),
        ev("e1", "check-out", datetime(2025, 3, 3, 19, 0)),
        ev("e1", "check-out", datetime(2025, 3, 3, 17, 0)),
    ]

    [row] = LedgerAggregator().aggregate(events, [], POLICY)

    assert row.check_in == datetime(2025, 3, 3, 8, 50)
    assert row.check_out == datetime(2025, 3, 3, 19, 0)
    assert row.check_in_status == AttendanceStatus.ON_TIME
    assert row.in_display == "08:50"
    assert row.out_display == "19:00"
    assert not row.is_late
    assert row.overtime_display == "+1.0h"


def test_lateness_and_overtime_use_the_given_policy():
    events = [
        ev("e1", "check-in", datetime(2025, 3, 3, 9, 15), AttendanceStatus.LATE),
        ev("e1", "check-out", datetime(2025, 3, 3, 18, 0)),
    ]

    [row] = LedgerAggregator().aggregate(events, [], POLICY)
    assert row.lateness_minutes == 15
    assert row.lateness_display == "15m"
    assert row.overtime_hours is None

    [relaxed] = LedgerAggregator().aggregate(events, [], POLICY.with_changes(work_start_time=time(9, 30)))
    assert relaxed.lateness_minutes is None
    # stored status is still carried for display
    assert relaxed.check_in_status == AttendanceStatus.LATE


def test_leave_without_events():
    [row] = LedgerAggregator().aggregate([], [leave("e1", date(2025, 3, 5), "Dentist")], POLICY)

    assert row.work_date == date(2025, 3, 5)
    assert row.is_leave
    assert row.in_display == "LEAVE"
    assert row.out_display == "--"
    assert row.lateness_display == ""
    assert row.overtime_display == ""
    assert row.notes == "Dentist"


def test_leave_suppresses_lateness_and_overtime():
    events = [
        ev("e1", "check-in", datetime(2025, 3, 3, 10, 0), AttendanceStatus.LATE),
        ev("e1", "check-out", datetime(2025, 3, 3, 21, 0)),
    ]

    [row] = LedgerAggregator().aggregate(events, [leave("e1", date(2025, 3, 3))], POLICY)

    assert row.is_leave
    assert row.check_in == datetime(2025, 3, 3, 10, 0)
    assert row.lateness_minutes is None
    assert row.overtime_hours is None
    assert row.in_display == "LEAVE"
    assert row.out_display == "--"


def test_blank_leave_reason_gets_placeholder():
    [row] = LedgerAggregator().aggregate([], [leave("e1", date(2025, 3, 5), "  ")], POLICY)

    assert row.leave_reason == "On Leave"


def test_rows_are_date_descending_and_stable_within_a_day():
    events = [
        ev("e2", "check-in", datetime(2025, 3, 3, 9, 0)),
        ev("e1", "check-in", datetime(2025, 3, 4, 9, 0)),
        ev("e1", "check-in", datetime(2025, 3, 3, 9, 0)),
        ev("e3", "check-out", datetime(2025, 3, 3, 18, 0)),
    ]
    leaves = [leave("e4", date(2025, 3, 3)), leave("e5", date(2025, 3, 1))]

    rows = LedgerAggregator().aggregate(events, leaves, POLICY)

    assert [(r.work_date.isoformat(), r.employee_id) for r in rows] == [
        ("2025-03-04", "e1"),
        ("2025-03-03", "e2"),
        ("2025-03-03", "e1"),
        ("2025-03-03", "e3"),
        ("2025-03-03", "e4"),
        ("2025-03-01", "e5"),
    ]


def test_check_out_only_row():
    [row] = LedgerAggregator().aggregate([ev("e1", "check-out", datetime(2025, 3, 3, 18, 30))], [], POLICY)

    assert row.in_display == "--"
    assert row.check_in_status is None
    assert row.overtime_hours == Decimal("0.5")


@pytest.fixture
def mixed():
    events = [
        ev("e1", "check-in", datetime(2025, 3, 2, 9, 0)),
        ev("e1", "check-in", datetime(2025, 3, 3, 9, 0)),
        ev("e2", "check-in", datetime(2025, 3, 3, 9, 0)),
        ev("e2", "check-in", datetime(2025, 3, 4, 9, 0)),
    ]
    leaves = [leave("e1", date(2025, 3, 4))]
    return events, leaves


def test_filter_single_day(mixed):
    events, leaves = mixed
    day = date(2025, 3, 3)

    rows = LedgerAggregator().aggregate(events, leaves, POLICY, LedgerFilter(date_start=day, date_end=day))

    assert {r.work_date for r in rows} == {day}
    assert len(rows) == 2


def test_filter_by_employee(mixed):
    events, leaves = mixed

    rows = LedgerAggregator().aggregate(events, leaves, POLICY, LedgerFilter(employee_id="e1"))

    assert {r.employee_id for r in rows} == {"e1"}
    assert len(rows) == 3


def test_open_ended_bounds(mixed):
    events, leaves = mixed

    after = LedgerAggregator().aggregate(events, leaves, POLICY, LedgerFilter(date_start=date(2025, 3, 4)))
    before = LedgerAggregator().aggregate(events, leaves, POLICY, LedgerFilter(date_end=date(2025, 3, 2)))

    assert len(after) == 2
    assert [r.work_date for r in before] == [date(2025, 3, 2)]


def test_malformed_query_bounds_mean_no_bound(mixed):
    events, leaves = mixed
    ledger_filter = LedgerFilter.from_query({"start": "03/03/2025", "end": "", "employee_id": "  "})

    assert ledger_filter == LedgerFilter()
    assert len(LedgerAggregator().aggregate(events, leaves, POLICY, ledger_filter)) == 5


def test_query_parsing():
    ledger_filter = LedgerFilter.from_query({"start": "2025-03-01", "end": "2025-03-31", "employee_id": "e9"})

    assert ledger_filter == LedgerFilter(date(2025, 3, 1), date(2025, 3, 31), "e9")


def test_filter_that_matches_nothing(mixed):
    events, leaves = mixed

    assert LedgerAggregator().aggregate(events, leaves, POLICY, LedgerFilter(employee_id="ghost")) == []


def test_string_bounds_on_a_directly_built_filter(mixed):
    events, leaves = mixed

    rows = LedgerAggregator().aggregate(events, leaves, POLICY, LedgerFilter(date_end="2025-03-03"))
    unbounded = LedgerAggregator().aggregate(events, leaves, POLICY, LedgerFilter(date_start="garbage", employee_id=" "))

    assert {r.work_date for r in rows} == {date(2025, 3, 2), date(2025, 3, 3)}
    assert len(unbounded) == 5
    assert LedgerFilter(date_start="2025-03-01", date_end=datetime(2025, 3, 31, 8, 0)) == LedgerFilter(
        date(2025, 3, 1), date(2025, 3, 31)
    )
