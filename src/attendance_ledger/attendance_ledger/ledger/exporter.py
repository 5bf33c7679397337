from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import List, Sequence

import pandas as pd
from markupsafe import escape

from ..core.constants import EXPORT_FILENAME_PREFIX, MISSING_PLACEHOLDER
from ..core.enums import ExportFormat
from ..core.exceptions import InvalidInput
from .model import LedgerRow

COLUMNS = ["Date", "Employee Name", "Check-In", "Check-Out", "Lateness", "Overtime", "Notes"]

MIMETYPES = {
    ExportFormat.CSV: "text/csv",
    ExportFormat.XLS: "application/vnd.ms-excel",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

_XLS_HEAD = """<html xmlns:o="urn:schemas-microsoft-com:office:office" xmlns:x="urn:schemas-microsoft-com:office:excel" xmlns="http://www.w3.org/TR/REC-html40">
<head>
<meta charset="UTF-8">
<style>
table { border-collapse: collapse; width: 100%; }
th { background-color: #f8fafc; color: #64748b; font-weight: bold; border: 1px solid #e2e8f0; padding: 8px; text-align: left; }
td { border: 1px solid #e2e8f0; padding: 8px; font-family: sans-serif; font-size: 12px; }
.late { color: #ef4444; font-weight: bold; }
.overtime { color: #10b981; font-weight: bold; }
.leave { color: #f59e0b; font-weight: bold; }
</style>
</head>
<body>
<table>
"""

_XLS_TAIL = """</tbody>
</table>
</body>
</html>
"""


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes
    mimetype: str


def parse_format(value) -> ExportFormat:
    if isinstance(value, ExportFormat):
        return value
    try:
        return ExportFormat(str(value or ExportFormat.CSV.value).lower())
    except ValueError:
        raise InvalidInput(f"Unsupported export format: {value!r}")


def export_filename(fmt: ExportFormat, today: date) -> str:
    return f"{EXPORT_FILENAME_PREFIX}_{today.isoformat()}.{fmt.value}"


def row_values(row: LedgerRow) -> List[str]:
    return [
        row.work_date.isoformat(),
        row.employee_name,
        row.in_display,
        row.out_display,
        row.lateness_display or MISSING_PLACEHOLDER,
        row.overtime_display or MISSING_PLACEHOLDER,
        row.notes,
    ]


class ReportExporter:
    """Serialises ledger rows into a spreadsheet-readable table."""

    def to_table(self, rows: Sequence[LedgerRow], fmt=ExportFormat.CSV) -> bytes:
        fmt = parse_format(fmt)
        if fmt == ExportFormat.XLS:
            return self._to_html(rows)
        if fmt == ExportFormat.XLSX:
            return self._to_xlsx(rows)
        return self._to_csv(rows)

    def _to_csv(self, rows: Sequence[LedgerRow]) -> bytes:
        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(COLUMNS)
        for row in rows:
            writer.writerow(row_values(row))
        return out.getvalue().encode("utf-8-sig")

    def _to_html(self, rows: Sequence[LedgerRow]) -> bytes:
        parts = [_XLS_HEAD, "<thead>\n<tr>"]
        parts.extend(f"<th>{escape(c)}</th>" for c in COLUMNS)
        parts.append("</tr>\n</thead>\n<tbody>\n")

        for row in rows:
            values = row_values(row)
            classes = ["", "", "leave" if row.is_leave else "", "", "late" if row.is_late else "", "overtime" if row.is_overtime else "", ""]
            parts.append("<tr>")
            for css, value in zip(classes, values):
                attr = f' class="{css}"' if css else ""
                parts.append(f"<td{attr}>{escape(value)}</td>")
            parts.append("</tr>\n")

        parts.append(_XLS_TAIL)
        return "".join(parts).encode("utf-8")

    def _to_xlsx(self, rows: Sequence[LedgerRow]) -> bytes:
        df = pd.DataFrame([row_values(r) for r in rows], columns=COLUMNS, dtype=str)
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Payroll")
        return out.getvalue()
