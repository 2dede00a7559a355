from __future__ import annotations

from flask import Flask, g

from ..common.http import ok, request_params
from ..container import Container
from ..core.enums import Role
from ..employees.controller import employee_payload
from ..employees.model import employee_to_dict


def register(app: Flask, container: Container) -> None:
    guards = container.guards

    def _login(role: Role | None, message: str):
        params = request_params()
        identifier = params.get("username") or params.get("email")
        employee = container.auth_service.login(identifier, params.get("password"), role=role)
        container.identity.on_login(employee)
        return ok({"message": message, "user": employee_to_dict(employee)})

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        return _login(None, "Login successful")

    @app.route("/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        return _login(Role.ADMIN, "Admin login successful")

    @app.route("/employee/login", methods=["POST"], endpoint="employee_login")
    def employee_login():
        return _login(Role.EMPLOYEE, "Employee login successful")

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.identity.on_logout()
        return ok({"message": "Logged out"})

    @app.route("/auth/me", methods=["GET", "POST"], endpoint="auth_me")
    @guards.login_required
    def auth_me():
        return ok({"user": employee_to_dict(g.current_employee)})

    @app.route("/auth/register", methods=["POST"], endpoint="register")
    def register_employee():
        fields = employee_payload(request_params())
        employee = container.employee_service.register(**fields)
        return ok({"message": "Registration successful", "user": employee_to_dict(employee)}, 201)
