from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .credentials import CredentialVerifier

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Use case: resolve the caller to an employee and check roles."""

    def __init__(self, employees: EmployeeRepository, verifier: CredentialVerifier):
        self._employees = employees
        self._verifier = verifier

    def authenticate(self, identifier, secret) -> Employee:
        identifier = (identifier or "").strip() if isinstance(identifier, str) else identifier
        if not identifier or not secret:
            raise ValidationError("Username and password required")

        employee = self._employees.get_by_username(str(identifier))
        # Unknown identifier and wrong secret fail the same way.
        if not employee or not self._verifier.verify(employee.password, str(secret)):
            logger.info("login failed for identifier=%s", identifier)
            raise AuthenticationError(INVALID_CREDENTIALS)
        return employee

    def login(self, identifier, secret, *, role: Optional[Role] = None) -> Employee:
        employee = self.authenticate(identifier, secret)
        if role is not None and employee.role != role:
            logger.info("login refused for identifier=%s: not %s", identifier, role.value)
            raise AuthenticationError(INVALID_CREDENTIALS)
        logger.info("login ok employee=%s role=%s", employee.employee_id, employee.role.value)
        return employee

    def resolve_identity(self, identifier) -> Employee:
        if not identifier or not str(identifier).strip():
            raise AuthenticationError("Authentication required")
        employee = self._employees.get_by_username(str(identifier).strip())
        if not employee:
            raise AuthenticationError(INVALID_CREDENTIALS)
        return employee

    @staticmethod
    def require_role(employee: Employee, role: Role) -> Employee:
        if employee.role != role:
            if role == Role.ADMIN:
                raise AuthorizationError("Access denied. Admin privileges required.")
            raise AuthorizationError("Access denied. Employee access only.")
        return employee
