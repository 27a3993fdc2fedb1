#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import (
    cents_to_dollars_str,
    decimal_to_cents,
    format_currency,
    parse_dollars_to_cents,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents (USD).

    Buy prices, sell prices and expense amounts are all Money. Negative
    values only appear as derived results (a losing flip's profit).

    Examples:
        >>> price = Money.from_dollars("3500")
        >>> str(price)
        '$3,500.00'

        >>> loss = Money.from_cents(-5000)
        >>> str(loss)
        '-$50.00'
        >>> loss.to_plain_str()
        '-50.00'
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int | float | Decimal) -> "Money":
        """
        Parse from a dollar value like '$123.45', 12, 19.99 or Decimal("7.5").

        Raises:
            ValueError: If the value is not a finite number
        """
        return cls(cents=parse_dollars_to_cents(dollars))

    @classmethod
    def from_decimal(cls, value: Decimal) -> "Money":
        """Create Money from a Decimal dollar amount, rounding half-up to cents."""
        return cls(cents=decimal_to_cents(value))

    @classmethod
    def zero(cls) -> "Money":
        """The zero amount."""
        return cls(cents=0)

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_dollars(self) -> str:
        """Get formatted dollar string."""
        return str(self)

    def to_plain_str(self) -> str:
        """Get dollar amount without symbol or grouping, for delimited exports."""
        return cents_to_dollars_str(self.cents)

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def is_positive(self) -> bool:
        """True when strictly greater than zero."""
        return self.cents > 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __neg__(self) -> "Money":
        return Money(cents=-self.cents)

    def __str__(self) -> str:
        """Format as grouped dollar string."""
        return format_currency(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"


def sum_money(amounts: "list[Money]") -> Money:
    """Sum Money values; an empty list sums to zero."""
    return Money(cents=sum((m.cents for m in amounts), 0))
