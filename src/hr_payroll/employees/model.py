from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: a staff record.

    Plain data object; ``password`` holds whatever the configured credential
    verifier stored and is never serialized.
    """

    employee_id: int
    emp_code: str
    name: str
    username: str
    password: str
    role: Role
    salary: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def designation(self) -> str:
        return "Administrator" if self.is_admin else "Employee"


def employee_to_dict(employee: Employee) -> dict:
    return {
        "employeeId": employee.employee_id,
        "empId": employee.emp_code,
        "name": employee.name,
        "username": employee.username,
        "role": employee.role.value,
        "salary": float(employee.salary),
        "createdAt": employee.created_at.isoformat() if employee.created_at else None,
        "updatedAt": employee.updated_at.isoformat() if employee.updated_at else None,
    }
