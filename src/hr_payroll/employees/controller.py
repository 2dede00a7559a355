from __future__ import annotations

from flask import Flask, g

from ..common.http import ok, request_params
from ..container import Container
from ..core.enums import AuthStrategy
from .model import employee_to_dict

# Wire names accepted for employee fields; the *_new aliases let body-credential
# callers keep their own username/password at the top level.
_FIELD_ALIASES = {
    "name": ("name",),
    "username": ("username_new", "username", "email"),
    "password": ("password_new", "password"),
    "emp_code": ("empId", "emp_code", "code"),
    "salary": ("salary", "monthlySalary"),
}


def employee_payload(params: dict, *, strip_credentials: bool = False) -> dict:
    """Pick employee fields from a nested ``employee`` object or the body itself.

    With ``strip_credentials`` the top-level username and password belong to
    the caller and are not treated as employee fields.
    """

    nested = params.get("employee")
    if isinstance(nested, dict):
        source = nested
    elif strip_credentials:
        source = {k: v for k, v in params.items() if k not in {"username", "password", "email"}}
    else:
        source = params

    fields: dict = {}
    for field, aliases in _FIELD_ALIASES.items():
        for alias in aliases:
            if alias in source and source[alias] not in (None, ""):
                fields[field] = source[alias]
                break
    return fields


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    service = container.employee_service
    caller_in_body = container.identity.name == AuthStrategy.BODY

    @app.route("/employees", methods=["GET", "POST"], endpoint="list_employees")
    @guards.admin_required
    def list_employees():
        employees = [employee_to_dict(e) for e in service.list_employees()]
        return ok({"employees": employees, "count": len(employees)})

    @app.route("/employees/create", methods=["POST"], endpoint="create_employee")
    @guards.admin_required
    def create_employee():
        fields = employee_payload(request_params(), strip_credentials=caller_in_body)
        employee = service.create_employee(
            name=fields.get("name"),
            username=fields.get("username"),
            password=fields.get("password"),
            emp_code=fields.get("emp_code"),
            salary=fields.get("salary"),
        )
        return ok({"message": "Employee created successfully", "employee": employee_to_dict(employee)}, 201)

    @app.route("/employees/<int:employee_id>", methods=["GET", "POST"], endpoint="get_employee")
    @guards.admin_required
    def get_employee(employee_id: int):
        return ok({"employee": employee_to_dict(service.get_employee(employee_id))})

    @app.route("/employees/<int:employee_id>/update", methods=["PUT", "POST"], endpoint="update_employee")
    @guards.admin_required
    def update_employee(employee_id: int):
        fields = employee_payload(request_params(), strip_credentials=caller_in_body)
        employee = service.update_employee(employee_id, **fields)
        return ok({"message": "Employee updated successfully", "employee": employee_to_dict(employee)})

    @app.route("/employees/<int:employee_id>/delete", methods=["DELETE", "POST"], endpoint="delete_employee")
    @guards.admin_required
    def delete_employee(employee_id: int):
        removed = service.delete_employee(employee_id)
        return ok({"message": "Employee and related records deleted successfully", "attendanceRemoved": removed})

    @app.route("/me", methods=["GET", "POST"], endpoint="me")
    @guards.employee_required
    def me():
        return ok({"employee": employee_to_dict(g.current_employee)})
