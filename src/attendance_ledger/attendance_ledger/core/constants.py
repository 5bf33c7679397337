"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_M = 6_371_000.0

DEFAULT_WORK_START = "09:00"
DEFAULT_WORK_END = "18:00"
DEFAULT_GEOFENCE_RADIUS_M = 150.0
DEFAULT_OFFICE_LAT = 31.2304
DEFAULT_OFFICE_LNG = 121.4737

MISSING_PLACEHOLDER = "--"
LEAVE_MARKER = "LEAVE"
DEFAULT_LEAVE_NOTE = "On Leave"
DEFAULT_LEAVE_REASON = "Leave of absence"

EXPORT_FILENAME_PREFIX = "payroll_report"
