SECRET_KEY = "test-secret"

STORE_BACKEND = "memory"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "attendance_ledger_test",
}

AUTO_INIT_DB = False

WORK_START_TIME = "09:00"
WORK_END_TIME = "18:00"
OFFICE_LAT = 0.0
OFFICE_LNG = 0.0
GEOFENCE_RADIUS_M = 100.0

REJECT_DUPLICATE_EVENTS = True

VERIFIER = "accept"
VERIFIER_FAIL_OPEN = False

ADMIN_PIN = "123456"

DEBUG = False
TESTING = True
