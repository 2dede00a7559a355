class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when credentials are missing or do not match an employee."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when an employee lacks the role required for an action."""

    status_code = 403


class NotFoundError(DomainError):
    """Raised when an employee or other referenced entity does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when a unique field is already taken."""

    status_code = 409


class StoreError(DomainError):
    """Raised when the underlying database fails."""

    status_code = 500
