from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class AdminGate:
    """Shared-secret (PIN) check guarding the admin surface."""

    def __init__(self, pin_hash: str):
        self._pin_hash = pin_hash

    @classmethod
    def from_pin(cls, pin: str) -> "AdminGate":
        return cls(generate_password_hash(str(pin)))

    def login(self, pin: str) -> Role:
        if not pin or not check_password_hash(self._pin_hash, str(pin).strip()):
            logger.info("admin PIN rejected")
            raise AuthenticationError("Invalid PIN")
        return Role.ADMIN
