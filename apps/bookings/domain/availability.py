"""
Availability engine

Decides whether a requested stay is bookable and what it costs. The engine
is pure: it receives the listing terms, the ranges already held by blocking
bookings and the current local date, and either returns a ``StayQuote`` or
raises. Fetching the snapshot and persisting the result is the job of
``apps.bookings.services``.

Ranges are half-open ``[check_in, check_out)``: a stay ending on the 15th
and one starting on the 15th do not overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from shared.domain.errors import ConflictError, ValidationError
from shared.domain.value_objects import DateRange, Money


@dataclass(frozen=True)
class StayQuote:
    nights: int
    total_price: Decimal
    currency: str

    @property
    def money(self) -> Money:
        return Money(self.total_price, self.currency)


def validate_stay(
    check_in: date,
    check_out: date,
    guests: int,
    *,
    max_guests: int,
    today: date,
) -> DateRange:
    """Input checks that need no booking data, in order of precedence."""
    if check_in < today:
        raise ValidationError("PAST_DATE", "Check-in date cannot be in the past.")
    if check_out <= check_in:
        raise ValidationError("INVALID_RANGE", "Check-out must be after check-in.")
    if guests < 1:
        raise ValidationError("INVALID_GUESTS", "At least one guest is required.")
    if guests > max_guests:
        raise ValidationError(
            "CAPACITY_EXCEEDED",
            f"This listing accommodates at most {max_guests} guests.",
        )
    return DateRange(check_in, check_out)


def find_conflict(stay: DateRange, booked: Iterable[DateRange]) -> DateRange | None:
    for existing in booked:
        if stay.overlaps_with(existing):
            return existing
    return None


def price_stay(stay: DateRange, price_per_night: Decimal, currency: str) -> StayQuote:
    """``nights * price_per_night`` rounded once, to the currency's minor unit.

    The nightly price is not rounded on its own: 3 nights at 99.50 JPY cost
    299 (298.50 half-up), not 3 x 100.
    """
    total = Money(Decimal(price_per_night) * stay.nights, currency)
    return StayQuote(nights=stay.nights, total_price=total.amount, currency=total.currency)


def quote_stay(
    *,
    check_in: date,
    check_out: date,
    guests: int,
    price_per_night: Decimal,
    currency: str,
    max_guests: int,
    booked: Iterable[DateRange],
    today: date,
) -> StayQuote:
    """Validate the request against the booked ranges and price it."""
    stay = validate_stay(check_in, check_out, guests, max_guests=max_guests, today=today)
    if find_conflict(stay, booked) is not None:
        raise ConflictError("DATE_CONFLICT", "The listing is not available for these dates.")
    return price_stay(stay, price_per_night, currency)


__all__ = ["StayQuote", "find_conflict", "price_stay", "quote_stay", "validate_stay"]
