from __future__ import annotations

from datetime import time

from ..core.exceptions import InvalidInput
from .datetime_utils import parse_hhmm


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise InvalidInput(f"{field_name} is required")
    return str(value).strip()


def require_hhmm(value: str, field_name: str) -> time:
    try:
        return parse_hhmm(require_non_empty(value, field_name))
    except ValueError:
        raise InvalidInput(f"{field_name} must be HH:MM")


def require_float(value, field_name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{field_name} must be a number")
