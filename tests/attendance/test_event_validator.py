from datetime import datetime

import pytest

from src.attendance_ledger.attendance_ledger.attendance.model import AttendanceEvent
from src.attendance_ledger.attendance_ledger.attendance.validator import EventValidator
from src.attendance_ledger.attendance_ledger.core.enums import AttendanceStatus, EventKind, Gender
from src.attendance_ledger.attendance_ledger.core.exceptions import DuplicateEvent, InvalidInput
from src.attendance_ledger.attendance_ledger.employees.model import Employee
from src.attendance_ledger.attendance_ledger.geo.model import GeoPoint

EMPLOYEES = [Employee(employee_id="e1", name="Ada", gender=Gender.FEMALE, position="Engineer")]


def event(kind: EventKind, ts: datetime, employee_id: str = "e1") -> AttendanceEvent:
    return AttendanceEvent(
        event_id=f"{employee_id}-{kind.value}-{ts.isoformat()}",
        employee_id=employee_id,
        employee_name="Ada",
        kind=kind,
        timestamp=ts,
        photo=b"jpeg",
        location=GeoPoint(0.0, 0.0),
        distance_m=0.0,
        status=AttendanceStatus.ON_TIME if kind == EventKind.CHECK_IN else AttendanceStatus.REGULAR,
    )


@pytest.mark.parametrize(
    "employee_id, photo",
    [(None, b"jpeg"), ("", b"jpeg"), ("   ", b"jpeg"), ("e1", None), ("e1", b"")],
)
def test_missing_identity_or_photo(employee_id, photo):
    with pytest.raises(InvalidInput):
        EventValidator().require_submission(EMPLOYEES, employee_id, photo)


def test_unknown_employee():
    with pytest.raises(InvalidInput):
        EventValidator().require_submission(EMPLOYEES, "nobody", b"jpeg")


def test_known_employee_is_returned():
    assert EventValidator().require_submission(EMPLOYEES, "e1", b"jpeg").name == "Ada"


def test_same_kind_same_day_is_duplicate():
    events = [event(EventKind.CHECK_IN, datetime(2025, 3, 3, 8, 55))]

    with pytest.raises(DuplicateEvent):
        EventValidator().ensure_not_duplicate(events, employee_id="e1", kind=EventKind.CHECK_IN, now=datetime(2025, 3, 3, 23, 59))


def test_other_kind_other_day_or_other_employee_is_allowed():
    events = [
        event(EventKind.CHECK_IN, datetime(2025, 3, 3, 8, 55)),
        event(EventKind.CHECK_OUT, datetime(2025, 3, 2, 18, 0)),
        event(EventKind.CHECK_OUT, datetime(2025, 3, 3, 18, 0), employee_id="e2"),
    ]
    validator = EventValidator()

    validator.ensure_not_duplicate(events, employee_id="e1", kind=EventKind.CHECK_OUT, now=datetime(2025, 3, 3, 18, 0))
    validator.ensure_not_duplicate(events, employee_id="e1", kind=EventKind.CHECK_IN, now=datetime(2025, 3, 4, 0, 0))


def test_duplicate_rule_can_be_disabled():
    events = [event(EventKind.CHECK_IN, datetime(2025, 3, 3, 8, 55))]

    EventValidator(reject_duplicates=False).ensure_not_duplicate(
        events, employee_id="e1", kind=EventKind.CHECK_IN, now=datetime(2025, 3, 3, 9, 30)
    )
