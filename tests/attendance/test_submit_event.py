import math
from datetime import datetime, time

import pytest

from src.attendance_ledger.attendance_ledger.attendance.service import AttendanceService
from src.attendance_ledger.attendance_ledger.attendance.validator import EventValidator
from src.attendance_ledger.attendance_ledger.common.ids import SequentialIdProvider
from src.attendance_ledger.attendance_ledger.core.constants import EARTH_RADIUS_M
from src.attendance_ledger.attendance_ledger.core.enums import AttendanceStatus, EventKind, Gender
from src.attendance_ledger.attendance_ledger.core.exceptions import (
    DuplicateEvent,
    FaceRejected,
    GeofenceViolation,
    InvalidInput,
    LocationUnavailable,
)
from src.attendance_ledger.attendance_ledger.employees.model import Employee
from src.attendance_ledger.attendance_ledger.geo.location import FixedLocationProvider
from src.attendance_ledger.attendance_ledger.geo.model import GeoPoint
from src.attendance_ledger.attendance_ledger.shifts.model import ShiftPolicy
from src.attendance_ledger.attendance_ledger.shifts.service import ShiftPolicyService
from src.attendance_ledger.attendance_ledger.store.memory_store import InMemoryStore

METERS_PER_DEGREE = EARTH_RADIUS_M * math.pi / 180
NEAR = GeoPoint(50 / METERS_PER_DEGREE, 0.0)
FAR = GeoPoint(150 / METERS_PER_DEGREE, 0.0)


class FakeVerifier:
    def __init__(self, answer: bool = True):
        self.answer = answer
        self.calls = 0

    def verify(self, photo: bytes) -> bool:
        self.calls += 1
        return self.answer


class CountingLocations:
    def __init__(self, point=None):
        self.point = point
        self.calls = 0

    def current_position(self):
        self.calls += 1
        return FixedLocationProvider(self.point).current_position()


def build(*, verifier=None, locations=None, reject_duplicates=True):
    store = InMemoryStore(
        employees=[Employee(employee_id="e1", name="Ada", gender=Gender.FEMALE, position="Engineer")],
        policy=ShiftPolicy(
            work_start_time=time(9, 0),
            work_end_time=time(18, 0),
            office_location=GeoPoint(0.0, 0.0),
            geofence_radius_m=100.0,
        ),
    )
    svc = AttendanceService(
        store,
        ShiftPolicyService(store),
        verifier=verifier or FakeVerifier(),
        locations=locations,
        validator=EventValidator(reject_duplicates=reject_duplicates),
        ids=SequentialIdProvider("ev"),
    )
    return svc, store


def test_late_check_in_inside_fence_is_recorded():
    svc, store = build()

    event = svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 3, 9, 15))

    assert event.event_id == "ev1"
    assert event.kind == EventKind.CHECK_IN
    assert event.status == AttendanceStatus.LATE
    assert event.employee_name == "Ada"
    assert event.distance_m == pytest.approx(50, abs=1e-6)
    assert list(store.get_events()) == [event]


def test_check_out_is_stored_as_regular():
    svc, store = build()

    event = svc.submit_event("e1", EventKind.CHECK_OUT, b"jpeg", NEAR, now=datetime(2025, 3, 3, 19, 0))

    assert event.status == AttendanceStatus.REGULAR


def test_outside_fence_is_rejected_and_nothing_is_stored():
    verifier = FakeVerifier()
    svc, store = build(verifier=verifier)

    with pytest.raises(GeofenceViolation) as exc:
        svc.submit_event("e1", "check-in", b"jpeg", FAR, now=datetime(2025, 3, 3, 9, 0))

    assert exc.value.distance == pytest.approx(150, abs=1e-6)
    assert verifier.calls == 0
    assert store.get_events() == ()


def test_second_check_in_same_day_is_duplicate():
    svc, store = build()
    svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 3, 8, 50))

    with pytest.raises(DuplicateEvent):
        svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 3, 13, 0))

    assert len(store.get_events()) == 1


def test_duplicates_allowed_when_rule_disabled():
    svc, store = build(reject_duplicates=False)
    svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 3, 8, 50))
    svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 3, 13, 0))

    assert len(store.get_events()) == 2


def test_face_rejection():
    svc, store = build(verifier=FakeVerifier(answer=False))

    with pytest.raises(FaceRejected):
        svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 3, 9, 0))

    assert store.get_events() == ()


def test_missing_photo_fails_before_any_external_call():
    verifier = FakeVerifier()
    locations = CountingLocations(NEAR)
    svc, _ = build(verifier=verifier, locations=locations)

    with pytest.raises(InvalidInput):
        svc.submit_event("e1", "check-in", b"", now=datetime(2025, 3, 3, 9, 0))

    assert verifier.calls == 0
    assert locations.calls == 0


def test_unknown_kind_is_invalid():
    svc, _ = build()

    with pytest.raises(InvalidInput):
        svc.submit_event("e1", "lunch", b"jpeg", NEAR)


def test_location_is_acquired_when_no_point_given():
    locations = CountingLocations(NEAR)
    svc, _ = build(locations=locations)

    event = svc.submit_event("e1", "check-in", b"jpeg", now=datetime(2025, 3, 3, 9, 0))

    assert locations.calls == 1
    assert event.location == NEAR
    assert event.status == AttendanceStatus.ON_TIME


def test_location_unavailable():
    svc, store = build(locations=CountingLocations(None))

    with pytest.raises(LocationUnavailable):
        svc.submit_event("e1", "check-in", b"jpeg", now=datetime(2025, 3, 3, 9, 0))

    assert store.get_events() == ()


def test_status_is_frozen_at_submission_time():
    svc, store = build()
    event = svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 3, 9, 30))

    store.replace_policy(store.get_policy().with_changes(work_start_time=time(10, 0)))

    assert store.get_events()[0].status == AttendanceStatus.LATE
    assert store.get_events()[0] == event


def test_history_is_newest_first():
    svc, _ = build()
    svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 3, 9, 0))
    svc.submit_event("e1", "check-out", b"jpeg", NEAR, now=datetime(2025, 3, 3, 18, 0))
    svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 4, 9, 0))

    history = svc.list_for_employee("e1", limit=2)

    assert [e.timestamp for e in history] == [datetime(2025, 3, 4, 9, 0), datetime(2025, 3, 3, 18, 0)]


def test_history_rejects_negative_limit():
    svc, _ = build()
    svc.submit_event("e1", "check-in", b"jpeg", NEAR, now=datetime(2025, 3, 3, 9, 0))

    with pytest.raises(InvalidInput):
        svc.list_for_employee("e1", limit=-1)
    assert svc.list_for_employee("e1", limit=0) == []
