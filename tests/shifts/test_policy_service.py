from datetime import time

import pytest

from src.attendance_ledger.attendance_ledger.core.enums import Role
from src.attendance_ledger.attendance_ledger.core.exceptions import AuthorizationError, InvalidInput
from src.attendance_ledger.attendance_ledger.geo.model import GeoPoint
from src.attendance_ledger.attendance_ledger.shifts.model import ShiftPolicy
from src.attendance_ledger.attendance_ledger.shifts.service import ShiftPolicyService
from src.attendance_ledger.attendance_ledger.store.memory_store import InMemoryStore


class Settings:
    WORK_START_TIME = "08:30"
    WORK_END_TIME = "17:30"
    OFFICE_LAT = 10.0
    OFFICE_LNG = 20.0
    GEOFENCE_RADIUS_M = 100


def test_fallback_policy_from_settings_until_one_is_saved():
    svc = ShiftPolicyService(InMemoryStore(), fallback=ShiftPolicy.from_settings(Settings))

    policy = svc.get_policy()

    assert policy.work_start_time == time(8, 30)
    assert policy.work_end_time == time(17, 30)
    assert policy.office_location == GeoPoint(10.0, 20.0)
    assert policy.geofence_radius_m == 100.0


def test_admin_update_is_persisted():
    store = InMemoryStore()
    svc = ShiftPolicyService(store)

    updated = svc.update_policy(
        current_role=Role.ADMIN,
        work_start_time="10:00",
        office_lat="1.5",
        geofence_radius_m=120,
    )

    assert store.get_policy() == updated
    assert updated.work_start_time == time(10, 0)
    assert updated.work_end_time == ShiftPolicy.default().work_end_time
    assert updated.office_location.lat == 1.5
    assert updated.office_location.lng == ShiftPolicy.default().office_location.lng
    assert updated.geofence_radius_m == 120.0


def test_non_admin_cannot_update():
    with pytest.raises(AuthorizationError):
        ShiftPolicyService(InMemoryStore()).update_policy(current_role=Role.EMPLOYEE, work_start_time="10:00")


@pytest.mark.parametrize(
    "changes",
    [
        {"work_start_time": "25:00"},
        {"work_end_time": "six pm"},
        {"office_lat": "north"},
        {"geofence_radius_m": 0},
    ],
)
def test_invalid_values_are_rejected(changes):
    store = InMemoryStore()
    with pytest.raises(InvalidInput):
        ShiftPolicyService(store).update_policy(current_role=Role.ADMIN, **changes)
    assert store.get_policy() is None


def test_policy_to_dict_uses_hhmm():
    assert ShiftPolicy.default().to_dict()["work_start_time"] == "09:00"
