"""Tests for the pure availability engine and the status state machine."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from django.test import SimpleTestCase

from apps.bookings.domain.availability import quote_stay
from apps.bookings.domain.status import (
    Actor,
    TransitionNotAllowed,
    allowed_actors,
    is_valid_transition,
)
from shared.domain.errors import ConflictError, ValidationError
from shared.domain.value_objects import DateRange

TODAY = date(2024, 3, 1)


def quote(check_in, check_out, guests=2, booked=(), price="100.00", currency="EUR", max_guests=4):
    return quote_stay(
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        price_per_night=Decimal(price),
        currency=currency,
        max_guests=max_guests,
        booked=list(booked),
        today=TODAY,
    )


class QuoteStayTests(SimpleTestCase):
    existing = [DateRange(date(2024, 3, 10), date(2024, 3, 15))]

    def test_overlapping_request_conflicts(self) -> None:
        with self.assertRaises(ConflictError) as ctx:
            quote(date(2024, 3, 14), date(2024, 3, 18), booked=self.existing)
        self.assertEqual(ctx.exception.code, "DATE_CONFLICT")

    def test_back_to_back_request_succeeds(self) -> None:
        result = quote(date(2024, 3, 15), date(2024, 3, 18), booked=self.existing)
        self.assertEqual(result.nights, 3)
        self.assertEqual(result.total_price, Decimal("300.00"))
        self.assertEqual(result.currency, "EUR")

    def test_exact_and_containing_ranges_conflict(self) -> None:
        for check_in, check_out in [
            (date(2024, 3, 10), date(2024, 3, 15)),
            (date(2024, 3, 11), date(2024, 3, 12)),
            (date(2024, 3, 5), date(2024, 3, 20)),
            (date(2024, 3, 8), date(2024, 3, 11)),
        ]:
            with self.subTest(check_in=check_in, check_out=check_out):
                with self.assertRaises(ConflictError):
                    quote(check_in, check_out, booked=self.existing)

    def test_past_check_in(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            quote(date(2024, 2, 29), date(2024, 3, 2))
        self.assertEqual(ctx.exception.code, "PAST_DATE")

    def test_check_in_today_is_allowed(self) -> None:
        self.assertEqual(quote(TODAY, date(2024, 3, 2)).nights, 1)

    def test_invalid_range(self) -> None:
        for check_out in (date(2024, 3, 5), date(2024, 3, 4)):
            with self.subTest(check_out=check_out):
                with self.assertRaises(ValidationError) as ctx:
                    quote(date(2024, 3, 5), check_out)
                self.assertEqual(ctx.exception.code, "INVALID_RANGE")

    def test_capacity_exceeded(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            quote(date(2024, 3, 5), date(2024, 3, 6), guests=5, max_guests=4)
        self.assertEqual(ctx.exception.code, "CAPACITY_EXCEEDED")

    def test_price_law(self) -> None:
        for nights in (1, 2, 7, 30):
            with self.subTest(nights=nights):
                check_in = date(2024, 4, 1)
                result = quote(check_in, check_in + timedelta(days=nights), price="33.33")
                self.assertEqual(result.nights, nights)
                self.assertEqual(result.total_price, Decimal("33.33") * result.nights)

    def test_price_rounds_to_minor_unit(self) -> None:
        result = quote(date(2024, 3, 5), date(2024, 3, 8), price="1000", currency="JPY")
        self.assertEqual(result.total_price, Decimal("3000"))
        self.assertEqual(result.money.currency, "JPY")

    def test_total_is_rounded_once_after_multiplying(self) -> None:
        result = quote(date(2024, 3, 5), date(2024, 3, 8), price="99.50", currency="JPY")
        self.assertEqual(result.total_price, Decimal("299"))

        result = quote(date(2024, 3, 5), date(2024, 3, 7), price="10.0015", currency="EUR")
        self.assertEqual(result.total_price, Decimal("20.00"))


class StatusMachineTests(SimpleTestCase):
    def test_confirm_is_for_host_side(self) -> None:
        self.assertEqual(allowed_actors("pending", "confirmed"), {Actor.HOST, Actor.COHOST})

    def test_cancel_is_open_to_guest(self) -> None:
        for current in ("pending", "confirmed"):
            with self.subTest(current=current):
                self.assertIn(Actor.GUEST, allowed_actors(current, "cancelled"))

    def test_complete_is_staff_only(self) -> None:
        self.assertEqual(allowed_actors("confirmed", "completed"), {Actor.STAFF})

    def test_terminal_states(self) -> None:
        for current in ("cancelled", "completed"):
            for target in ("pending", "confirmed", "cancelled", "completed"):
                with self.subTest(current=current, target=target):
                    self.assertFalse(is_valid_transition(current, target))
                    with self.assertRaises(TransitionNotAllowed) as ctx:
                        allowed_actors(current, target)
                    self.assertEqual(ctx.exception.code, "INVALID_TRANSITION")

    def test_no_way_back_to_pending(self) -> None:
        with self.assertRaises(ValidationError):
            allowed_actors("confirmed", "pending")

    def test_unknown_status(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            allowed_actors("pending", "archived")
        self.assertEqual(ctx.exception.code, "INVALID_STATUS")
