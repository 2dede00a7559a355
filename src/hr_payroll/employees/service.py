from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..auth.credentials import CredentialVerifier
from ..common.validators import check_length, optional_str, parse_amount, require_non_empty
from ..core.constants import (
    DEFAULT_MONTHLY_SALARY,
    EMP_CODE_MAX_LENGTH,
    MAX_SALARY,
    NAME_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employee records (admin)."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        verifier: CredentialVerifier,
        *,
        default_salary: int = DEFAULT_MONTHLY_SALARY,
        allow_self_registration: bool = False,
    ):
        self._employees = employees
        self._attendance = attendance
        self._verifier = verifier
        self._default_salary = Decimal(default_salary)
        self._allow_self_registration = bool(allow_self_registration)

    def create_employee(
        self,
        *,
        name: str,
        username: str,
        password: str,
        emp_code: str,
        salary=None,
    ) -> Employee:
        name = require_non_empty(name, "Name", max_length=NAME_MAX_LENGTH)
        username = require_non_empty(username, "Username", max_length=USERNAME_MAX_LENGTH)
        password = require_non_empty(password, "Password", max_length=PASSWORD_MAX_LENGTH)
        emp_code = require_non_empty(emp_code, "Employee ID", max_length=EMP_CODE_MAX_LENGTH)

        if salary is None or salary == "":
            amount = self._default_salary
        else:
            amount = parse_amount(salary, "Salary", max_abs=MAX_SALARY)

        if self._employees.find_conflict(username=username, emp_code=emp_code):
            raise ConflictError("Username or Employee ID already exists")

        employee_id = self._employees.create(
            emp_code=emp_code,
            name=name,
            username=username,
            password=self._verifier.encode(password),
            role=Role.EMPLOYEE,
            salary=amount,
        )
        logger.info("employee created id=%s code=%s", employee_id, emp_code)
        return self.get_employee(employee_id)

    def register(self, **fields) -> Employee:
        if not self._allow_self_registration:
            raise AuthorizationError("Self-registration is disabled")
        return self.create_employee(**fields)

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_by_role(Role.EMPLOYEE)

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def update_employee(
        self,
        employee_id: int,
        *,
        name: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        emp_code: Optional[str] = None,
        salary=None,
    ) -> Employee:
        self.get_employee(employee_id)

        changes: dict = {}
        if optional_str(name):
            changes["name"] = check_length(optional_str(name), "Name", NAME_MAX_LENGTH)
        if optional_str(username):
            changes["username"] = check_length(optional_str(username), "Username", USERNAME_MAX_LENGTH)
        if optional_str(password):
            secret = check_length(optional_str(password), "Password", PASSWORD_MAX_LENGTH)
            changes["password"] = self._verifier.encode(secret)
        if optional_str(emp_code):
            changes["emp_code"] = check_length(optional_str(emp_code), "Employee ID", EMP_CODE_MAX_LENGTH)
        if salary is not None and salary != "":
            changes["salary"] = parse_amount(salary, "Salary", max_abs=MAX_SALARY)

        if "username" in changes or "emp_code" in changes:
            clash = self._employees.find_conflict(
                username=changes.get("username"),
                emp_code=changes.get("emp_code"),
                exclude_id=employee_id,
            )
            if clash:
                raise ConflictError("Username or Employee ID already exists")

        if not self._employees.update(employee_id, changes):
            raise NotFoundError("Employee not found")
        logger.info("employee updated id=%s fields=%s", employee_id, sorted(changes))
        return self.get_employee(employee_id)

    def delete_employee(self, employee_id: int) -> int:
        """Delete the employee and its attendance; returns removed attendance rows."""

        employee = self.get_employee(employee_id)
        if employee.is_admin:
            raise ValidationError("Admin accounts cannot be deleted")

        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        removed = self._attendance.delete_for_employee(employee_id)
        logger.info("employee deleted id=%s attendance_removed=%s", employee_id, removed)
        return removed
