"""
Common Value Objects

Value objects used across multiple domains:
- Money: Represents monetary amounts with currency, in fixed-point decimals
- DateRange: Represents a half-open range of dates (check-in to check-out)
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from shared.domain.base import ValueObject

# ISO 4217 minor units; anything not listed uses two decimal places
CURRENCY_MINOR_UNITS = {
    'EUR': 2,
    'USD': 2,
    'GBP': 2,
    'CHF': 2,
    'CAD': 2,
    'JPY': 0,
    'KRW': 0,
    'KWD': 3,
}


def minor_units(currency: str) -> int:
    return CURRENCY_MINOR_UNITS.get(currency.upper(), 2)


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Represents a monetary amount with currency. The amount is always a
    Decimal quantized to the currency's minor unit, so no binary floating
    point ever enters price arithmetic.
    """
    amount: Decimal
    currency: str = 'EUR'

    def __post_init__(self):
        if not self.currency or len(self.currency) != 3:
            raise ValueError(f"Invalid currency code: {self.currency!r}")
        if isinstance(self.amount, float):
            raise TypeError("Money amount must be Decimal, int or str, not float")
        amount = Decimal(str(self.amount)) if not isinstance(self.amount, Decimal) else self.amount
        if amount < 0:
            raise ValueError("Amount cannot be negative")
        quantum = Decimal(1).scaleb(-minor_units(self.currency))
        object.__setattr__(self, 'currency', self.currency.upper())
        object.__setattr__(self, 'amount', amount.quantize(quantum, rounding=ROUND_HALF_UP))

    def __add__(self, other: 'Money') -> 'Money':
        """Add two money objects"""
        if not isinstance(other, Money):
            raise TypeError("Can only add Money to Money")
        if self.currency != other.currency:
            raise ValueError(f"Cannot add different currencies: {self.currency} and {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> 'Money':
        """Multiply money by a whole factor, e.g. a number of nights"""
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError("Can only multiply Money by int or Decimal")
        return Money(self.amount * factor, self.currency)

    __rmul__ = __mul__

    def __str__(self):
        return f"{self.amount:,} {self.currency}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date (inclusive) to end_date (exclusive).
    Used for booking periods and availability checks.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date >= self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must be before end date ({self.end_date})")

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Note: end_date is exclusive, so adjacent ranges don't overlap.

        Examples:
            - DateRange(10, 15) overlaps with DateRange(14, 18) -> True
            - DateRange(10, 15) overlaps with DateRange(15, 18) -> False (adjacent)
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")
        return self.start_date < other.end_date and other.start_date < self.end_date

    def contains(self, check_date: date) -> bool:
        """Start date is inclusive, end date is exclusive."""
        return self.start_date <= check_date < self.end_date

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __len__(self) -> int:
        return self.nights

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
