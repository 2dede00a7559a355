from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.credentials import CredentialVerifier, build_verifier
from .auth.guards import Guards
from .auth.service import AuthService
from .auth.strategies import IdentityStrategy, build_strategy
from .core import constants
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.standard_calculator import StandardSalaryCalculator
from .payroll.service import SalaryService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    verifier: CredentialVerifier
    identity: IdentityStrategy

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    salary_service: SalaryService
    guards: Guards

    conn: Optional[DatabaseConnection] = None


def wire_container(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    settings: Any,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    verifier = build_verifier(getattr(settings, "PASSWORD_SCHEME", "plain"))
    identity = build_strategy(
        getattr(settings, "AUTH_STRATEGY", "cookie"),
        header_name=getattr(settings, "AUTH_HEADER", constants.DEFAULT_AUTH_HEADER),
    )

    auth_service = AuthService(employees_repo, verifier)
    employee_service = EmployeeService(
        employees_repo,
        attendance_repo,
        verifier,
        default_salary=int(getattr(settings, "DEFAULT_MONTHLY_SALARY", constants.DEFAULT_MONTHLY_SALARY)),
        allow_self_registration=bool(getattr(settings, "ALLOW_SELF_REGISTRATION", False)),
    )
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        allow_self_marking=bool(getattr(settings, "ALLOW_SELF_MARKING", False)),
    )
    salary_service = SalaryService(
        employees_repo,
        attendance_repo,
        calculator=StandardSalaryCalculator(
            int(getattr(settings, "SALARY_DAY_DIVISOR", constants.SALARY_DAY_DIVISOR))
        ),
    )

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        verifier=verifier,
        identity=identity,
        auth_service=auth_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        salary_service=salary_service,
        guards=Guards(auth_service, identity),
        conn=conn,
    )


def build_container(*, db_config: dict, settings: Any) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        settings=settings,
        conn=conn,
    )
