from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .attendance.validator import EventValidator
from .common.ids import IdProvider, UuidProvider
from .database.connection import DBConfig, DatabaseConnection
from .database.schema import ensure_schema
from .employees.service import EmployeeService
from .leaves.service import LeaveService
from .ledger.service import LedgerService
from .reports.holidays import Holiday, holidays_from_settings
from .shifts.model import ShiftPolicy
from .shifts.service import ShiftPolicyService
from .store.memory_store import InMemoryStore
from .store.mysql_store import MySQLStore
from .store.repository import AttendanceStore
from .users.admin_gate import AdminGate
from .verification.verifier import AcceptAllVerifier, FaceVerifier, GuardedVerifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: AttendanceStore

    admin_gate: AdminGate
    policy_service: ShiftPolicyService
    attendance_service: AttendanceService
    ledger_service: LedgerService
    employee_service: EmployeeService
    leave_service: LeaveService
    holidays: Sequence[Holiday] = ()


def _build_store(settings) -> AttendanceStore:
    backend = str(getattr(settings, "STORE_BACKEND", "memory")).lower()
    if backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_schema(conn)
        return MySQLStore(conn)
    if backend != "memory":
        raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")
    return InMemoryStore()


def _build_verifier(settings) -> FaceVerifier:
    kind = str(getattr(settings, "VERIFIER", "accept")).lower()
    if kind == "face":
        # Heavy optional dependency (dlib); only imported when configured.
        from .verification.face_detector import FaceDetectionVerifier

        inner: FaceVerifier = FaceDetectionVerifier()
    elif kind == "accept":
        inner = AcceptAllVerifier()
    else:
        raise ValueError(f"Unknown VERIFIER: {kind!r}")
    verifier = GuardedVerifier(inner, fail_open=bool(getattr(settings, "VERIFIER_FAIL_OPEN", False)))
    logger.info("face verifier: %s (fail_open=%s)", type(inner).__name__, verifier.fail_open)
    return verifier


def build_container(
    settings,
    *,
    store: Optional[AttendanceStore] = None,
    verifier: Optional[FaceVerifier] = None,
    ids: Optional[IdProvider] = None,
) -> Container:
    store = store if store is not None else _build_store(settings)
    verifier = verifier if verifier is not None else _build_verifier(settings)
    ids = ids or UuidProvider()

    policy_service = ShiftPolicyService(store, fallback=ShiftPolicy.from_settings(settings))
    attendance_service = AttendanceService(
        store,
        policy_service,
        verifier=verifier,
        validator=EventValidator(reject_duplicates=bool(getattr(settings, "REJECT_DUPLICATE_EVENTS", True))),
        strategy_factory=AttendanceStrategyFactory(),
        ids=ids,
    )

    logger.debug("container ready (store=%s, verifier=%s)", type(store).__name__, type(verifier).__name__)
    return Container(
        store=store,
        admin_gate=AdminGate.from_pin(getattr(settings, "ADMIN_PIN")),
        policy_service=policy_service,
        attendance_service=attendance_service,
        ledger_service=LedgerService(store, policy_service),
        employee_service=EmployeeService(store, ids=ids),
        leave_service=LeaveService(store, ids=ids),
        holidays=holidays_from_settings(settings),
    )
