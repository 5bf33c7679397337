from __future__ import annotations

import uuid
from typing import Protocol


class IdProvider(Protocol):
    def new_id(self) -> str:
        raise NotImplementedError


class UuidProvider:
    """Random UUID4 identifiers (hex form, no dashes)."""

    def new_id(self) -> str:
        return uuid.uuid4().hex


class SequentialIdProvider:
    """Deterministic ids (``<prefix>1``, ``<prefix>2``...) for tests and demos."""

    def __init__(self, prefix: str = "id"):
        self._prefix = prefix
        self._next = 0

    def new_id(self) -> str:
        self._next += 1
        return f"{self._prefix}{self._next}"
