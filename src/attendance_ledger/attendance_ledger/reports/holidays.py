from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping, Sequence, Tuple

from ..common.datetime_utils import parse_iso_date
from ..core.enums import HolidayKind
from ..core.exceptions import InvalidInput


@dataclass(frozen=True)
class Holiday:
    holiday_date: date
    name: str
    kind: HolidayKind = HolidayKind.INTERNATIONAL

    def to_dict(self) -> dict:
        return {"date": self.holiday_date.isoformat(), "name": self.name, "type": self.kind.value}


DEFAULT_HOLIDAYS: Tuple[Tuple[str, str, str], ...] = (
    ("2025-01-01", "New Year's Day", "international"),
    ("2025-02-14", "Valentine's Day", "international"),
    ("2025-04-13", "Songkran Festival", "thai"),
    ("2025-04-14", "Songkran Festival", "thai"),
    ("2025-04-15", "Songkran Festival", "thai"),
    ("2025-05-01", "Labor Day", "international"),
    ("2025-07-28", "King's Birthday", "thai"),
    ("2025-08-12", "Mother's Day", "thai"),
    ("2025-10-13", "King Rama IX Memorial", "thai"),
    ("2025-10-23", "Chulalongkorn Day", "thai"),
    ("2025-12-05", "King's Birthday (Father's Day)", "thai"),
    ("2025-12-10", "Constitution Day", "thai"),
    ("2025-12-25", "Christmas Day", "international"),
)


def parse_holidays(entries: Iterable) -> Sequence[Holiday]:
    """Build holidays from ``(date, name, type)`` tuples or ``{"date", "name", "type"}`` dicts."""
    holidays = []
    for entry in entries:
        try:
            if isinstance(entry, Mapping):
                raw_date, name, kind = entry.get("date"), entry.get("name"), entry.get("type", HolidayKind.INTERNATIONAL.value)
            else:
                raw_date, name, kind = entry
            holidays.append(Holiday(parse_iso_date(str(raw_date)), str(name), HolidayKind(kind)))
        except (TypeError, ValueError):
            raise InvalidInput(f"Invalid holiday entry: {entry!r}")
    return tuple(holidays)


def holidays_from_settings(settings) -> Sequence[Holiday]:
    """``HOLIDAYS`` setting, or the built-in calendar when it is unset."""
    entries = getattr(settings, "HOLIDAYS", None)
    return parse_holidays(DEFAULT_HOLIDAYS if entries is None else entries)
