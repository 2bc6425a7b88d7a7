"""
Domain error taxonomy

Every error raised by the booking and authorization core carries a stable
machine-readable ``code`` and a human-readable ``message``. The API layer
maps each class to an HTTP status (see ``shared.api.exceptions``); the core
itself never logs or swallows them.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for recoverable domain errors."""

    default_code = "ERROR"
    default_message = "Domain error."

    def __init__(self, code: str | None = None, message: str | None = None) -> None:
        self.code = code or self.default_code
        self.message = message or self.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(DomainError):
    """Malformed or out-of-policy input the client can fix."""

    default_code = "VALIDATION_ERROR"
    default_message = "Invalid input."


class ConflictError(DomainError):
    """State-dependent clash, e.g. a double booking."""

    default_code = "CONFLICT"
    default_message = "The request conflicts with the current state."


class AuthorizationError(DomainError):
    """Denied by policy; retrying requires a role or grant change."""

    default_code = "FORBIDDEN"
    default_message = "You do not have permission to perform this action."


class AuthenticationRequiredError(AuthorizationError):
    default_code = "UNAUTHENTICATED"
    default_message = "Authentication credentials were not provided."


class NotFoundError(DomainError):
    """Referenced entity is absent."""

    default_code = "NOT_FOUND"
    default_message = "Not found."


class InfrastructureError(DomainError):
    """Persistence layer failure (connection loss, timeout). Retried by the caller."""

    default_code = "INFRASTRUCTURE_ERROR"
    default_message = "The service is temporarily unavailable."


__all__ = [
    "AuthenticationRequiredError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "ValidationError",
]
