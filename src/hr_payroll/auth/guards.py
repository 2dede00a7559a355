from __future__ import annotations

from functools import wraps

from flask import g

from ..core.enums import Role
from ..employees.model import Employee
from .service import AuthService
from .strategies import IdentityStrategy


class Guards:
    """Route decorators that resolve the caller and enforce roles.

    The resolved employee is available as ``g.current_employee``.
    """

    def __init__(self, auth: AuthService, strategy: IdentityStrategy):
        self._auth = auth
        self._strategy = strategy

    def current(self) -> Employee:
        employee = self._strategy.resolve(self._auth)
        g.current_employee = employee
        return employee

    def login_required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            self.current()
            return view(*args, **kwargs)

        return wrapper

    def role_required(self, role: Role):
        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                self._auth.require_role(self.current(), role)
                return view(*args, **kwargs)

            return wrapper

        return decorator

    def admin_required(self, view):
        return self.role_required(Role.ADMIN)(view)

    def employee_required(self, view):
        return self.role_required(Role.EMPLOYEE)(view)
