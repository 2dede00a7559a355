from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from typing import Optional

import pytest

from hr_payroll.attendance.model import AttendanceRecord
from hr_payroll.container import wire_container
from hr_payroll.core.enums import AttendanceStatus, Role
from hr_payroll.core.exceptions import ConflictError
from hr_payroll.employees.model import Employee
from hr_payroll.main import create_app


class InMemoryEmployees:
    def __init__(self):
        self._by_id: dict[int, Employee] = {}
        self._id = 0

    def add(
        self,
        *,
        username: str,
        password: str = "secret",
        name: str = "A",
        emp_code: Optional[str] = None,
        role: Role = Role.EMPLOYEE,
        salary=30000,
    ) -> Employee:
        employee_id = self.create(
            emp_code=emp_code or f"E{self._id + 1}",
            name=name,
            username=username,
            password=password,
            role=role,
            salary=Decimal(str(salary)),
        )
        return self._by_id[employee_id]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def get_by_username(self, username: str) -> Optional[Employee]:
        for e in self._by_id.values():
            if e.username == username:
                return e
        return None

    def find_conflict(self, *, username=None, emp_code=None, exclude_id=None) -> Optional[Employee]:
        for e in self._by_id.values():
            if exclude_id is not None and e.employee_id == int(exclude_id):
                continue
            if (username and e.username == username) or (emp_code and e.emp_code == emp_code):
                return e
        return None

    def create(self, *, emp_code, name, username, password, role, salary) -> int:
        if self.find_conflict(username=username, emp_code=emp_code):
            raise ConflictError("Duplicate value for a unique field")
        self._id += 1
        self._by_id[self._id] = Employee(
            employee_id=self._id,
            emp_code=emp_code,
            name=name,
            username=username,
            password=password,
            role=role,
            salary=Decimal(salary),
            created_at=datetime(2025, 1, 1, 9, 0),
        )
        return self._id

    def update(self, employee_id: int, changes: dict) -> bool:
        current = self._by_id.get(int(employee_id))
        if not current:
            return False
        self._by_id[int(employee_id)] = replace(current, **changes)
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._by_id.pop(int(employee_id), None) is not None

    def list_by_role(self, role: Role):
        items = [e for e in self._by_id.values() if e.role == role]
        items.sort(key=lambda e: e.employee_id, reverse=True)
        return items


class InMemoryAttendance:
    def __init__(self):
        self._by_employee_date: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0

    def upsert(self, *, employee_id: int, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        key = (int(employee_id), work_date)
        existing = self._by_employee_date.get(key)
        if existing:
            rec = replace(existing, status=status)
        else:
            self._id += 1
            rec = AttendanceRecord(attendance_id=self._id, employee_id=int(employee_id), work_date=work_date, status=status)
        self._by_employee_date[key] = rec
        return rec

    def list_for_employee(self, employee_id: int, *, start_date=None, end_date=None):
        items = [
            r
            for r in self._by_employee_date.values()
            if r.employee_id == int(employee_id)
            and (start_date is None or r.work_date >= start_date)
            and (end_date is None or r.work_date <= end_date)
        ]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items

    def count_status_between(self, employee_id: int, *, start_date: date, end_date: date, status: AttendanceStatus) -> int:
        return sum(1 for r in self.list_for_employee(employee_id, start_date=start_date, end_date=end_date) if r.status == status)

    def delete_for_employee(self, employee_id: int) -> int:
        keys = [k for k in self._by_employee_date if k[0] == int(employee_id)]
        for k in keys:
            del self._by_employee_date[k]
        return len(keys)

    def all(self):
        return list(self._by_employee_date.values())


def make_settings(**overrides) -> SimpleNamespace:
    values = {
        "AUTH_STRATEGY": "body",
        "AUTH_HEADER": "X-User-Email",
        "PASSWORD_SCHEME": "plain",
        "DEFAULT_MONTHLY_SALARY": 30000,
        "SALARY_DAY_DIVISOR": 30,
        "ALLOW_SELF_REGISTRATION": False,
        "ALLOW_SELF_MARKING": False,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def admin(employees_repo):
    return employees_repo.add(
        username="admin",
        password="admin123",
        name="System Admin",
        emp_code="ADMIN001",
        role=Role.ADMIN,
        salary=50000,
    )


@pytest.fixture
def worker(employees_repo):
    return employees_repo.add(username="alice", password="pw-alice", name="Alice", emp_code="E1", salary=30000)


@pytest.fixture
def build_app(employees_repo, attendance_repo):
    def _build(**overrides):
        container = wire_container(
            employees_repo=employees_repo,
            attendance_repo=attendance_repo,
            settings=make_settings(**overrides),
        )
        app = create_app(container, settings_module="config.testing")
        return app, container

    return _build


@pytest.fixture
def client(build_app, admin):
    app, _ = build_app()
    return app.test_client()


@pytest.fixture
def fixed_now():
    return datetime(2025, 3, 14, 9, 30, 0)
