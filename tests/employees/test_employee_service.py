from datetime import date
from decimal import Decimal

import pytest

from hr_payroll.auth.credentials import HashedVerifier, PlaintextVerifier
from hr_payroll.core.enums import AttendanceStatus, Role
from hr_payroll.core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from hr_payroll.employees.service import EmployeeService


@pytest.fixture
def service(employees_repo, attendance_repo):
    return EmployeeService(employees_repo, attendance_repo, PlaintextVerifier())


def _create(service, **overrides):
    fields = {"name": "Bob", "username": "bob", "password": "pw", "emp_code": "E100"}
    fields.update(overrides)
    return service.create_employee(**fields)


def test_create_uses_default_salary_and_employee_role(service):
    emp = _create(service)

    assert emp.salary == Decimal("30000")
    assert emp.role == Role.EMPLOYEE


def test_create_with_salary(service):
    assert _create(service, salary="45000.50").salary == Decimal("45000.50")


@pytest.mark.parametrize("field", ["name", "username", "password", "emp_code"])
def test_create_requires_fields(service, field):
    with pytest.raises(ValidationError):
        _create(service, **{field: " "})


def test_create_rejects_non_numeric_salary(service):
    with pytest.raises(ValidationError):
        _create(service, salary="lots")


@pytest.mark.parametrize("overrides", [{"emp_code": "E200"}, {"username": "other"}])
def test_create_rejects_duplicate_username_or_code(service, overrides):
    _create(service)

    with pytest.raises(ConflictError):
        _create(service, **overrides)


def test_list_excludes_admins(service, admin):
    _create(service)

    assert [e.username for e in service.list_employees()] == ["bob"]


def test_update_changes_only_given_fields(service):
    emp = _create(service)

    updated = service.update_employee(emp.employee_id, name="Robert", salary=40000)

    assert updated.name == "Robert"
    assert updated.salary == Decimal("40000")
    assert updated.username == "bob"
    assert updated.password == "pw"


def test_update_conflicting_username(service):
    _create(service)
    other = _create(service, username="carol", emp_code="E101")

    with pytest.raises(ConflictError):
        service.update_employee(other.employee_id, username="bob")


def test_update_missing_employee(service):
    with pytest.raises(NotFoundError):
        service.update_employee(99, name="X")


def test_delete_removes_attendance(service, attendance_repo):
    emp = _create(service)
    attendance_repo.upsert(employee_id=emp.employee_id, work_date=date(2025, 3, 1), status=AttendanceStatus.PRESENT)
    attendance_repo.upsert(employee_id=emp.employee_id, work_date=date(2025, 3, 2), status=AttendanceStatus.ABSENT)

    removed = service.delete_employee(emp.employee_id)

    assert removed == 2
    assert attendance_repo.all() == []
    with pytest.raises(NotFoundError):
        service.get_employee(emp.employee_id)


def test_delete_refuses_admin(service, admin):
    with pytest.raises(ValidationError):
        service.delete_employee(admin.employee_id)


def test_register_disabled_by_default(service):
    with pytest.raises(AuthorizationError):
        service.register(name="Bob", username="bob", password="pw", emp_code="E100")


def test_register_when_enabled(employees_repo, attendance_repo):
    service = EmployeeService(employees_repo, attendance_repo, PlaintextVerifier(), allow_self_registration=True)

    emp = service.register(name="Bob", username="bob", password="pw", emp_code="E100")

    assert emp.role == Role.EMPLOYEE


def test_hashed_verifier_stores_hash(employees_repo, attendance_repo):
    verifier = HashedVerifier()
    service = EmployeeService(employees_repo, attendance_repo, verifier)

    emp = _create(service)

    assert emp.password != "pw"
    assert verifier.verify(emp.password, "pw")


@pytest.mark.parametrize(
    "overrides",
    [
        {"salary": "10000000000"},
        {"salary": -10000000000},
        {"name": "n" * 101},
        {"username": "u" * 151},
        {"emp_code": "E" * 51},
        {"password": "p" * 256},
    ],
)
def test_create_rejects_values_the_table_cannot_hold(service, employees_repo, overrides):
    with pytest.raises(ValidationError):
        _create(service, **overrides)
    assert employees_repo.list_by_role(Role.EMPLOYEE) == []


def test_create_accepts_largest_salary_and_name(service):
    emp = _create(service, name="n" * 100, salary="9999999999.99")

    assert emp.salary == Decimal("9999999999.99")


@pytest.mark.parametrize("changes", [{"salary": "1e12"}, {"name": "n" * 101}, {"emp_code": "E" * 51}])
def test_update_rejects_values_the_table_cannot_hold(service, changes):
    emp = _create(service)

    with pytest.raises(ValidationError):
        service.update_employee(emp.employee_id, **changes)
    assert service.get_employee(emp.employee_id).name == "Bob"
