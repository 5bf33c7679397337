from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..shifts.service import ShiftPolicyService
from ..store.repository import AttendanceStore
from .aggregator import LedgerAggregator
from .exporter import MIMETYPES, ExportFile, ReportExporter, export_filename, parse_format
from .model import LedgerFilter, LedgerRow


class LedgerService:
    def __init__(
        self,
        store: AttendanceStore,
        policies: ShiftPolicyService,
        *,
        aggregator: Optional[LedgerAggregator] = None,
        exporter: Optional[ReportExporter] = None,
    ):
        self._store = store
        self._policies = policies
        self._aggregator = aggregator or LedgerAggregator()
        self._exporter = exporter or ReportExporter()

    def build_ledger(self, ledger_filter: Optional[LedgerFilter] = None) -> List[LedgerRow]:
        return self._aggregator.aggregate(
            self._store.get_events(),
            self._store.get_leaves(),
            self._policies.get_policy(),
            ledger_filter,
        )

    def export_ledger(self, rows: Sequence[LedgerRow], fmt="csv", *, today: Optional[date] = None) -> ExportFile:
        fmt = parse_format(fmt)
        today = today or now_local().date()
        return ExportFile(
            filename=export_filename(fmt, today),
            content=self._exporter.to_table(rows, fmt),
            mimetype=MIMETYPES[fmt],
        )

    def build_report(self, *, current_role: Role, ledger_filter: Optional[LedgerFilter] = None) -> List[LedgerRow]:
        """Admin-facing variant of ``build_ledger``."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin access required")
        return self.build_ledger(ledger_filter)
