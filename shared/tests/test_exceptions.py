"""Tests for the domain error to HTTP mapping."""

from __future__ import annotations

from django.db.utils import OperationalError
from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated

from shared.api.exceptions import domain_exception_handler, get_http_status_for_error
from shared.domain.errors import (
    AuthenticationRequiredError,
    AuthorizationError,
    ConflictError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from shared.infrastructure.db import persistence_guard


class ExceptionHandlerTests(SimpleTestCase):
    def test_status_mapping(self) -> None:
        cases = [
            (ValidationError("PAST_DATE"), status.HTTP_400_BAD_REQUEST),
            (AuthenticationRequiredError(), status.HTTP_401_UNAUTHORIZED),
            (AuthorizationError(), status.HTTP_403_FORBIDDEN),
            (NotFoundError(), status.HTTP_404_NOT_FOUND),
            (ConflictError("DATE_CONFLICT"), status.HTTP_409_CONFLICT),
            (InfrastructureError(), status.HTTP_503_SERVICE_UNAVAILABLE),
        ]
        for exc, expected in cases:
            with self.subTest(exc=exc):
                self.assertEqual(get_http_status_for_error(exc), expected)

    def test_response_body_carries_code(self) -> None:
        response = domain_exception_handler(ConflictError("DATE_CONFLICT", "Taken."), {})
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data, {"detail": "Taken.", "code": "DATE_CONFLICT"})

    def test_default_code_and_message(self) -> None:
        response = domain_exception_handler(AuthorizationError(), {})
        self.assertEqual(response.data["code"], "FORBIDDEN")
        self.assertTrue(response.data["detail"])

    def test_non_domain_errors_fall_back_to_drf(self) -> None:
        response = domain_exception_handler(NotAuthenticated(), {})
        self.assertIsNotNone(response)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class PersistenceGuardTests(SimpleTestCase):
    def test_operational_error_becomes_infrastructure_error(self) -> None:
        with self.assertRaises(InfrastructureError) as ctx:
            with persistence_guard():
                raise OperationalError("connection lost")
        self.assertEqual(ctx.exception.code, "INFRASTRUCTURE_ERROR")
        self.assertIsInstance(ctx.exception.__cause__, OperationalError)

    def test_domain_errors_pass_through(self) -> None:
        with self.assertRaises(ConflictError):
            with persistence_guard():
                raise ConflictError("DATE_CONFLICT")
