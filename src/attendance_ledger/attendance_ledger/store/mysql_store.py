from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.model import AttendanceEvent
from ..core.enums import AttendanceStatus, EventKind, Gender
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from ..employees.model import Employee
from ..geo.model import GeoPoint
from ..leaves.model import LeaveRecord
from ..shifts.model import ShiftPolicy


class MySQLStore:
    """Store backed by MySQL.

    ``replace_*`` deletes the table content and bulk-inserts the new collection
    in one transaction; ``seq`` keeps the collection order.
    """

    def __init__(self, conn_factory):
        self._conn_factory = conn_factory

    def get_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id, name, gender, position FROM employees ORDER BY seq")
            return tuple(
                Employee(
                    employee_id=str(r["employee_id"]),
                    name=r["name"],
                    gender=Gender(r["gender"]),
                    position=r["position"],
                )
                for r in fetchall(cur)
            )

    def replace_employees(self, employees: Sequence[Employee]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees")
            if employees:
                cur.executemany(
                    "INSERT INTO employees (employee_id, name, gender, position, seq) VALUES (%s, %s, %s, %s, %s)",
                    [(e.employee_id, e.name, e.gender.value, e.position, i) for i, e in enumerate(employees)],
                )

    def get_events(self) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, employee_id, employee_name, kind, event_time, photo, lat, lng, distance_m, status
                FROM attendance_events
                ORDER BY seq
                """
            )
            return tuple(
                AttendanceEvent(
                    event_id=str(r["event_id"]),
                    employee_id=str(r["employee_id"]),
                    employee_name=r["employee_name"],
                    kind=EventKind(r["kind"]),
                    timestamp=r["event_time"],
                    photo=bytes(r["photo"] or b""),
                    location=GeoPoint(float(r["lat"]), float(r["lng"])),
                    distance_m=float(r["distance_m"]),
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            )

    def replace_events(self, events: Sequence[AttendanceEvent]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_events")
            if events:
                cur.executemany(
                    """
                    INSERT INTO attendance_events
                        (event_id, employee_id, employee_name, kind, event_time, photo, lat, lng, distance_m, status, seq)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                    """,
                    [
                        (
                            e.event_id,
                            e.employee_id,
                            e.employee_name,
                            e.kind.value,
                            e.timestamp,
                            e.photo,
                            e.location.lat,
                            e.location.lng,
                            e.distance_m,
                            e.status.value,
                            i,
                        )
                        for i, e in enumerate(events)
                    ],
                )

    def get_leaves(self) -> Sequence[LeaveRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT leave_id, employee_id, employee_name, leave_date, reason FROM leave_records ORDER BY seq")
            return tuple(
                LeaveRecord(
                    leave_id=str(r["leave_id"]),
                    employee_id=str(r["employee_id"]),
                    employee_name=r["employee_name"],
                    leave_date=r["leave_date"],
                    reason=r.get("reason") or "",
                )
                for r in fetchall(cur)
            )

    def replace_leaves(self, leaves: Sequence[LeaveRecord]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM leave_records")
            if leaves:
                cur.executemany(
                    """
                    INSERT INTO leave_records (leave_id, employee_id, employee_name, leave_date, reason, seq)
                    VALUES (%s, %s, %s, %s, %s, %s)
                    """,
                    [
                        (lv.leave_id, lv.employee_id, lv.employee_name, lv.leave_date, lv.reason, i)
                        for i, lv in enumerate(leaves)
                    ],
                )

    def get_policy(self) -> Optional[ShiftPolicy]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_start_time, work_end_time, office_lat, office_lng, geofence_radius_m
                FROM shift_policy
                WHERE policy_id=1
                """
            )
            r = fetchone(cur)
            if not r:
                return None
            return ShiftPolicy(
                work_start_time=normalize_mysql_time(r["work_start_time"]),
                work_end_time=normalize_mysql_time(r["work_end_time"]),
                office_location=GeoPoint(float(r["office_lat"]), float(r["office_lng"])),
                geofence_radius_m=float(r["geofence_radius_m"]),
            )

    def replace_policy(self, policy: ShiftPolicy) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shift_policy")
            cur.execute(
                """
                INSERT INTO shift_policy
                    (policy_id, work_start_time, work_end_time, office_lat, office_lng, geofence_radius_m)
                VALUES (1, %s, %s, %s, %s, %s)
                """,
                (
                    policy.work_start_time,
                    policy.work_end_time,
                    policy.office_location.lat,
                    policy.office_location.lng,
                    policy.geofence_radius_m,
                ),
            )
