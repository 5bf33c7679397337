"""Export the attendance ledger to a file (no Flask involved).

Usage: python scripts/export_ledger.py [--start YYYY-MM-DD] [--end YYYY-MM-DD]
       [--employee ID] [--format csv|xls|xlsx] [--out DIR]
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_ledger.attendance_ledger.container import build_container
from src.attendance_ledger.attendance_ledger.ledger.model import LedgerFilter


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--start")
    parser.add_argument("--end")
    parser.add_argument("--employee")
    parser.add_argument("--format", default="csv")
    parser.add_argument("--out", default=".")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)

    ledger_filter = LedgerFilter.from_query({"start": args.start, "end": args.end, "employee_id": args.employee})
    rows = container.ledger_service.build_ledger(ledger_filter)
    export = container.ledger_service.export_ledger(rows, args.format)

    out_file = Path(args.out) / export.filename
    out_file.write_bytes(export.content)
    print(f"OK: {len(rows)} rows -> {out_file}")


if __name__ == "__main__":
    main()
