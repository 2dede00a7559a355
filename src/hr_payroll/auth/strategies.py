"""Where a request's identity comes from.

One strategy is chosen at startup from ``AUTH_STRATEGY``.
"""

from __future__ import annotations

from typing import Protocol

from flask import request, session

from ..common.http import request_params
from ..core.constants import DEFAULT_AUTH_HEADER, SESSION_IDENTITY_KEY
from ..core.enums import AuthStrategy
from ..core.exceptions import AuthenticationError, ValidationError
from ..employees.model import Employee
from .service import AuthService


class IdentityStrategy(Protocol):
    name: AuthStrategy

    def resolve(self, auth: AuthService) -> Employee:
        raise NotImplementedError

    def on_login(self, employee: Employee) -> None:
        raise NotImplementedError

    def on_logout(self) -> None:
        raise NotImplementedError


class BodyCredentialsStrategy:
    """Every request carries ``username`` and ``password``."""

    name = AuthStrategy.BODY

    def resolve(self, auth: AuthService) -> Employee:
        params = request_params()
        username = params.get("username")
        password = params.get("password")
        if not username or not password:
            raise AuthenticationError("Username and password required in request body")
        return auth.authenticate(username, password)

    def on_login(self, employee: Employee) -> None:
        return None

    def on_logout(self) -> None:
        return None


class HeaderIdentityStrategy:
    """Trusts an identity header set by an upstream gateway."""

    name = AuthStrategy.HEADER

    def __init__(self, header_name: str = DEFAULT_AUTH_HEADER):
        self._header_name = header_name

    @property
    def header_name(self) -> str:
        return self._header_name

    def resolve(self, auth: AuthService) -> Employee:
        identifier = request.headers.get(self._header_name, "")
        if not identifier.strip():
            raise AuthenticationError(f"{self._header_name} header required")
        return auth.resolve_identity(identifier)

    def on_login(self, employee: Employee) -> None:
        return None

    def on_logout(self) -> None:
        return None


class CookieSessionStrategy:
    """Identity kept in the Flask session cookie between login and logout."""

    name = AuthStrategy.COOKIE

    def resolve(self, auth: AuthService) -> Employee:
        identifier = session.get(SESSION_IDENTITY_KEY)
        if not identifier:
            raise AuthenticationError("Not logged in")
        try:
            return auth.resolve_identity(identifier)
        except AuthenticationError:
            # employee renamed or deleted since login
            session.pop(SESSION_IDENTITY_KEY, None)
            raise

    def on_login(self, employee: Employee) -> None:
        session.clear()
        session[SESSION_IDENTITY_KEY] = employee.username

    def on_logout(self) -> None:
        session.clear()


def build_strategy(name: str, *, header_name: str = DEFAULT_AUTH_HEADER) -> IdentityStrategy:
    try:
        strategy = AuthStrategy((name or "").lower())
    except ValueError:
        raise ValidationError(f"Unknown auth strategy: {name}") from None

    if strategy == AuthStrategy.BODY:
        return BodyCredentialsStrategy()
    if strategy == AuthStrategy.HEADER:
        return HeaderIdentityStrategy(header_name)
    return CookieSessionStrategy()
