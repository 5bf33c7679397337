from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Gender


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Historical events and leaves keep a copy of ``name``, so deleting an
    employee never rewrites them.
    """

    employee_id: str
    name: str
    gender: Gender
    position: str

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "gender": self.gender.value,
            "position": self.position,
        }
