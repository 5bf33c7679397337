from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of the caller, used for admin-only operations."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class EventKind(str, Enum):
    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"


class AttendanceStatus(str, Enum):
    """Status stored on an attendance event at creation time."""

    ON_TIME = "on-time"
    LATE = "late"
    REGULAR = "regular"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ExportFormat(str, Enum):
    CSV = "csv"
    XLS = "xls"
    XLSX = "xlsx"


class HolidayKind(str, Enum):
    INTERNATIONAL = "international"
    THAI = "thai"
