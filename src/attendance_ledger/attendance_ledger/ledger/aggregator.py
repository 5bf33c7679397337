from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple

from ..attendance.model import AttendanceEvent
from ..core.constants import DEFAULT_LEAVE_NOTE
from ..core.enums import AttendanceStatus, EventKind
from ..leaves.model import LeaveRecord
from ..shifts.limits import lateness_minutes, overtime_hours
from ..shifts.model import ShiftPolicy
from .model import LedgerFilter, LedgerRow


@dataclass
class _DayBucket:
    work_date: date
    employee_id: str
    employee_name: str
    check_in: Optional[datetime] = None
    check_in_status: Optional[AttendanceStatus] = None
    check_out: Optional[datetime] = None
    is_leave: bool = False
    leave_reason: Optional[str] = None


class LedgerAggregator:
    """Folds events and leaves into one row per (date, employee).

    Rows come out date-descending; rows sharing a date keep the order in
    which their key first appeared (events before leaves).
    """

    def aggregate(
        self,
        events: Iterable[AttendanceEvent],
        leaves: Iterable[LeaveRecord],
        policy: ShiftPolicy,
        ledger_filter: Optional[LedgerFilter] = None,
    ) -> List[LedgerRow]:
        buckets: Dict[Tuple[date, str], _DayBucket] = {}

        for e in events:
            key = (e.work_date, e.employee_id)
            bucket = buckets.get(key)
            if bucket is None:
                bucket = buckets[key] = _DayBucket(e.work_date, e.employee_id, e.employee_name)

            if e.kind == EventKind.CHECK_IN:
                if bucket.check_in is None or e.timestamp < bucket.check_in:
                    bucket.check_in = e.timestamp
                    bucket.check_in_status = e.status
            elif bucket.check_out is None or e.timestamp > bucket.check_out:
                bucket.check_out = e.timestamp

        for leave in leaves:
            key = (leave.leave_date, leave.employee_id)
            bucket = buckets.get(key)
            if bucket is None:
                bucket = buckets[key] = _DayBucket(leave.leave_date, leave.employee_id, leave.employee_name)
            bucket.is_leave = True
            bucket.leave_reason = (leave.reason or "").strip() or DEFAULT_LEAVE_NOTE

        ledger_filter = ledger_filter or LedgerFilter()
        kept = [b for b in buckets.values() if ledger_filter.accepts(b.work_date, b.employee_id)]
        kept.sort(key=lambda b: b.work_date, reverse=True)
        return [self._to_row(b, policy) for b in kept]

    @staticmethod
    def _to_row(bucket: _DayBucket, policy: ShiftPolicy) -> LedgerRow:
        late = over = None
        if not bucket.is_leave:
            # Recomputed from the given policy, not read from the stored status.
            if bucket.check_in is not None:
                late = lateness_minutes(bucket.check_in, policy)
            if bucket.check_out is not None:
                over = overtime_hours(bucket.check_out, policy)

        return LedgerRow(
            work_date=bucket.work_date,
            employee_id=bucket.employee_id,
            employee_name=bucket.employee_name,
            check_in=bucket.check_in,
            check_out=bucket.check_out,
            check_in_status=bucket.check_in_status,
            is_leave=bucket.is_leave,
            leave_reason=bucket.leave_reason,
            lateness_minutes=late,
            overtime_hours=over,
        )
