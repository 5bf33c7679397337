from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value) -> Optional[date]:
    """Lenient variant used by query filters: anything unparsable is ``None``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        return None


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into a time of day (seconds are always zero)."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def now_local() -> datetime:
    """Current local wall-clock time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
