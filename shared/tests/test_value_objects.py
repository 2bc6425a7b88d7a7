"""Tests for Money and DateRange."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase

from shared.domain.value_objects import DateRange, Money, minor_units


class MoneyTests(SimpleTestCase):
    def test_amount_is_quantized_half_up(self) -> None:
        self.assertEqual(Money(Decimal("10.005"), "EUR").amount, Decimal("10.01"))
        self.assertEqual(Money(Decimal("10.004"), "EUR").amount, Decimal("10.00"))

    def test_zero_decimal_currency(self) -> None:
        self.assertEqual(minor_units("jpy"), 0)
        self.assertEqual(Money(Decimal("1500.5"), "JPY").amount, Decimal("1501"))

    def test_multiplication_by_nights_stays_exact(self) -> None:
        nightly = Money(Decimal("33.33"), "EUR")
        self.assertEqual((nightly * 3).amount, Decimal("99.99"))
        self.assertEqual((3 * nightly).amount, Decimal("99.99"))

    def test_rejects_float(self) -> None:
        with self.assertRaises(TypeError):
            Money(0.1, "EUR")

    def test_rejects_negative(self) -> None:
        with self.assertRaises(ValueError):
            Money(Decimal("-1"), "EUR")

    def test_cannot_add_different_currencies(self) -> None:
        with self.assertRaises(ValueError):
            Money(Decimal("1"), "EUR") + Money(Decimal("1"), "USD")


class DateRangeTests(SimpleTestCase):
    def setUp(self) -> None:
        self.stay = DateRange(date(2024, 3, 10), date(2024, 3, 15))

    def test_requires_start_before_end(self) -> None:
        with self.assertRaises(ValueError):
            DateRange(date(2024, 3, 15), date(2024, 3, 15))

    def test_adjacent_ranges_do_not_overlap(self) -> None:
        after = DateRange(date(2024, 3, 15), date(2024, 3, 18))
        before = DateRange(date(2024, 3, 7), date(2024, 3, 10))
        self.assertFalse(self.stay.overlaps_with(after))
        self.assertFalse(self.stay.overlaps_with(before))

    def test_overlap_is_symmetric(self) -> None:
        cases = [
            DateRange(date(2024, 3, 10), date(2024, 3, 15)),  # exact match
            DateRange(date(2024, 3, 14), date(2024, 3, 18)),  # partial
            DateRange(date(2024, 3, 11), date(2024, 3, 12)),  # contained
            DateRange(date(2024, 3, 1), date(2024, 3, 30)),  # containing
        ]
        for other in cases:
            with self.subTest(other=other):
                self.assertTrue(self.stay.overlaps_with(other))
                self.assertTrue(other.overlaps_with(self.stay))

    def test_nights(self) -> None:
        self.assertEqual(self.stay.nights, 5)
        self.assertEqual(len(self.stay), 5)
        self.assertTrue(self.stay.contains(date(2024, 3, 10)))
        self.assertFalse(self.stay.contains(date(2024, 3, 15)))
