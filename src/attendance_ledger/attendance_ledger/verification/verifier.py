from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class FaceVerifier(Protocol):
    def verify(self, photo: bytes) -> bool:
        """True when the photo is an acceptable selfie for check-in."""
        raise NotImplementedError


class AcceptAllVerifier:
    """Accepts any non-empty photo. Used when no verifier is configured."""

    def verify(self, photo: bytes) -> bool:
        return bool(photo)


class GuardedVerifier:
    """Wraps a verifier with an explicit policy for verifier failures.

    ``fail_open=True`` accepts the photo when the underlying verifier raises;
    ``fail_open=False`` rejects it.
    """

    def __init__(self, inner: FaceVerifier, *, fail_open: bool = False):
        self._inner = inner
        self._fail_open = bool(fail_open)

    @property
    def fail_open(self) -> bool:
        return self._fail_open

    def verify(self, photo: bytes) -> bool:
        try:
            return bool(self._inner.verify(photo))
        except Exception:
            logger.warning(
                "face verifier %s failed, %s",
                type(self._inner).__name__,
                "accepting" if self._fail_open else "rejecting",
                exc_info=True,
            )
            return self._fail_open
