from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this protocol, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_conflict(
        self,
        *,
        username: Optional[str] = None,
        emp_code: Optional[str] = None,
        exclude_id: Optional[int] = None,
    ) -> Optional[Employee]:
        """Return an employee other than ``exclude_id`` holding either value."""

        raise NotImplementedError

    def create(
        self,
        *,
        emp_code: str,
        name: str,
        username: str,
        password: str,
        role: Role,
        salary: Decimal,
    ) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, changes: dict) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[Employee]:
        raise NotImplementedError
