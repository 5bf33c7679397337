import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "memory" keeps collections in-process; "mysql" uses DB_CONFIG.
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_ledger"),
}

# Creates tables on startup (idempotent: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Initial shift policy, used until an admin saves one
WORK_START_TIME = os.getenv("WORK_START_TIME", "09:00")
WORK_END_TIME = os.getenv("WORK_END_TIME", "18:00")
OFFICE_LAT = float(os.getenv("OFFICE_LAT", "31.2304"))
OFFICE_LNG = float(os.getenv("OFFICE_LNG", "121.4737"))
GEOFENCE_RADIUS_M = float(os.getenv("GEOFENCE_RADIUS_M", "150"))

REJECT_DUPLICATE_EVENTS = bool(int(os.getenv("REJECT_DUPLICATE_EVENTS", "1")))

# "accept" or "face" (face_recognition based detector)
VERIFIER = os.getenv("VERIFIER", "accept")
VERIFIER_FAIL_OPEN = bool(int(os.getenv("VERIFIER_FAIL_OPEN", "0")))

# Calendar holidays as (YYYY-MM-DD, name, "international"|"thai"); None uses the built-in list.
HOLIDAYS = None

ADMIN_PIN = os.getenv("ADMIN_PIN", "123456")

DEBUG = True
