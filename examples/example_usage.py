"""Example: use the service layer directly (no Flask).

Submits a check-in and a check-out for a demo employee and prints the ledger.
"""

import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import testing

from src.attendance_ledger.attendance_ledger.container import build_container
from src.attendance_ledger.attendance_ledger.core.enums import Role
from src.attendance_ledger.attendance_ledger.geo.model import GeoPoint


def main():
    container = build_container(testing)
    emp = container.employee_service.add_employee(current_role=Role.ADMIN, name="Ada", position="Engineer")

    office = GeoPoint(testing.OFFICE_LAT, testing.OFFICE_LNG)
    container.attendance_service.submit_event(emp.employee_id, "check-in", b"selfie", office, now=datetime(2025, 3, 3, 9, 15))
    container.attendance_service.submit_event(emp.employee_id, "check-out", b"selfie", office, now=datetime(2025, 3, 3, 19, 0))

    for row in container.ledger_service.build_ledger():
        print(row.to_dict())


if __name__ == "__main__":
    main()
