#!/usr/bin/env python3
"""
Core Data Models for AutoTrackr

Flip and expense records as supplied by the record store, plus the derived
FlipTotals value object. Optional fields are explicit ``None``; categories
are a closed enum with an explicit NONE member.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .dates import FinancialDate, days_between
from .money import Money


class Category(Enum):
    """Expense categories. NONE marks an uncategorized line item."""

    PARTS = "parts"
    LABOR = "labor"
    FEES = "fees"
    MISC = "misc"
    NONE = "none"

    @classmethod
    def from_value(cls, value: "str | Category | None") -> "Category":
        """
        Coerce stored category values into the enum.

        ``None`` and the empty string mean uncategorized.

        Raises:
            ValueError: If the value is outside the closed category set
        """
        if isinstance(value, Category):
            return value
        if value is None or not value.strip():
            return cls.NONE
        normalized = value.strip().lower()
        if normalized == cls.NONE.value:
            return cls.NONE
        try:
            return cls(normalized)
        except ValueError as e:
            raise ValueError(f"Unsupported expense category: {value}") from e

    @property
    def label(self) -> str:
        """Capitalized name used in report summaries."""
        if self is Category.NONE:
            return "Miscellaneous"
        return self.value.capitalize()

    def to_value(self) -> str | None:
        """Stored representation; uncategorized becomes None."""
        return None if self is Category.NONE else self.value


# Report order for the named categories. Uncategorized items always follow.
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.PARTS,
    Category.LABOR,
    Category.FEES,
    Category.MISC,
)


@dataclass
class Flip:
    """
    One vehicle purchase-to-resale transaction.

    A flip is open until ``sold_date`` is set. The buy price is always
    present and is the basis of every cost figure, sold or not.
    """

    id: int
    buy_price: Money
    created_at: datetime
    updated_at: datetime

    # Optional vehicle details
    year: int | None = None
    make: str | None = None
    model: str | None = None
    vin: str | None = None
    miles: int | None = None

    # Sale details
    sell_price: Money | None = None
    sold_date: datetime | None = None

    def __post_init__(self) -> None:
        if not self.buy_price.is_positive():
            raise ValueError(f"Flip {self.id}: buy price must be positive, got {self.buy_price}")
        if self.miles is not None and self.miles < 0:
            raise ValueError(f"Flip {self.id}: miles cannot be negative")

    @property
    def is_sold(self) -> bool:
        return self.sold_date is not None

    @property
    def display_name(self) -> str | None:
        """Year, make and model joined by spaces, or None when all are unset."""
        parts = [str(part) for part in (self.year, self.make, self.model) if part]
        return " ".join(parts) if parts else None

    @property
    def days_to_sell(self) -> int | None:
        """Days between purchase record and sale, None while open."""
        if self.sold_date is None:
            return None
        return days_between(self.created_at, self.sold_date)


@dataclass
class LineItem:
    """One itemized expense belonging to exactly one flip."""

    id: int
    flip_id: int
    title: str
    amount: Money
    created_at: datetime
    updated_at: datetime
    category: Category = Category.NONE
    date: FinancialDate | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError(f"Line item {self.id}: title cannot be empty")
        self.category = Category.from_value(self.category)

    @property
    def effective_date(self) -> FinancialDate:
        """Incurred date, falling back to the day the record was created."""
        if self.date is not None:
            return self.date
        return FinancialDate.from_datetime(self.created_at)


@dataclass(frozen=True)
class FlipTotals:
    """
    Derived financial figures for a flip. Computed on demand, never stored.

    ``roi`` is a ratio (0.25 means 25%).
    """

    total_cost: Money
    profit: Money
    roi: float = field(default=0.0)
