from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, emp_code, name, username, password, role, salary, created_at, updated_at"
_UPDATABLE = ("emp_code", "name", "username", "password", "salary")


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        emp_code=row["emp_code"],
        name=row["name"],
        username=row["username"],
        password=row["password"],
        role=Role(row["role"]),
        salary=Decimal(str(row["salary"])),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_username(self, username: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE username=%s", (username,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def find_conflict(
        self,
        *,
        username: Optional[str] = None,
        emp_code: Optional[str] = None,
        exclude_id: Optional[int] = None,
    ) -> Optional[Employee]:
        clauses: list[str] = []
        params: list[object] = []
        if username:
            clauses.append("username=%s")
            params.append(username)
        if emp_code:
            clauses.append("emp_code=%s")
            params.append(emp_code)
        if not clauses:
            return None

        where = "(" + " OR ".join(clauses) + ")"
        if exclude_id is not None:
            where += " AND employee_id<>%s"
            params.append(int(exclude_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE {where} LIMIT 1", tuple(params))
            row = fetchone(cur)
            return _to_employee(row) if row else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(emp_code, name, username, password, role, salary)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (emp_code, name, username, password, role.value, salary),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, changes: dict) -> bool:
        fields = [k for k in _UPDATABLE if k in changes]
        if not fields:
            return self.get_by_id(employee_id) is not None

        assignments = ", ".join(f"{k}=%s" for k in fields)
        params = [changes[k] for k in fields] + [int(employee_id)]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE employees SET {assignments} WHERE employee_id=%s", tuple(params))
            if cur.rowcount > 0:
                return True
            # rowcount is 0 when the values were unchanged; tell that apart from a missing row
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (int(employee_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def list_by_role(self, role: Role) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE role=%s ORDER BY created_at DESC, employee_id DESC",
                (role.value,),
            )
            return [_to_employee(r) for r in fetchall(cur)]
