"""DRF exception handler converting domain errors to HTTP responses.

Status mapping:
- 400 Bad Request: ValidationError
- 401 Unauthorized: AuthenticationRequiredError
- 403 Forbidden: AuthorizationError
- 404 Not Found: NotFoundError
- 409 Conflict: ConflictError
- 503 Service Unavailable: InfrastructureError

Anything that is not a DomainError is handed to DRF's default handler.
"""

from __future__ import annotations

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.errors import (
    AuthenticationRequiredError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)

# Order matters: subclasses before their parents
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (AuthenticationRequiredError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InfrastructureError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def get_http_status_for_error(exc: DomainError) -> int:
    for error_class, http_status in ERROR_STATUS:
        if isinstance(exc, error_class):
            return http_status
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc, context):  # type: ignore
    if isinstance(exc, DomainError):
        return Response(
            {"detail": exc.message, "code": exc.code},
            status=get_http_status_for_error(exc),
        )
    return exception_handler(exc, context)
