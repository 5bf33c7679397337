from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.ids import IdProvider, UuidProvider
from ..common.validators import require_non_empty
from ..core.enums import Gender, Role
from ..core.exceptions import AuthorizationError, InvalidInput
from ..store.repository import AttendanceStore
from .model import Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, store: AttendanceStore, *, ids: Optional[IdProvider] = None):
        self._store = store
        self._ids = ids or UuidProvider()

    def list_employees(self) -> Sequence[Employee]:
        return self._store.get_employees()

    def get(self, employee_id: str) -> Optional[Employee]:
        for e in self._store.get_employees():
            if e.employee_id == employee_id:
                return e
        return None

    def add_employee(self, *, current_role: Role, name: str, position: str, gender: str = Gender.MALE.value) -> Employee:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin access required")

        name = require_non_empty(name, "Name")
        position = require_non_empty(position, "Position")
        try:
            gender_value = Gender(gender or Gender.MALE.value)
        except ValueError:
            raise InvalidInput("Gender must be male, female or other")

        employee = Employee(employee_id=self._ids.new_id(), name=name, gender=gender_value, position=position)
        self._store.replace_employees([*self._store.get_employees(), employee])
        logger.info("employee added: %s (%s)", employee.employee_id, employee.name)
        return employee

    def delete_employee(self, *, current_role: Role, employee_id: str) -> None:
        """Remove from the roster; events and leaves keep their name snapshot."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin access required")

        if self.get(employee_id) is None:
            raise InvalidInput("Employee not found")
        self._store.replace_employees([e for e in self._store.get_employees() if e.employee_id != employee_id])
        logger.info("employee deleted: %s", employee_id)
