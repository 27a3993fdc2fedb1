#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting for expense dates and
report headers.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timezone


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, format: str | None = None) -> "FinancialDate":
        """
        Parse from string.

        Without an explicit format, accepts ISO dates ("2024-03-15") and ISO
        timestamps ("2024-03-15T10:30:00.000Z"), keeping only the date part.

        Args:
            date_str: Date string to parse
            format: Optional strptime format

        Returns:
            FinancialDate object
        """
        if format is not None:
            return cls(date=datetime.strptime(date_str, format).date())
        return cls(date=parse_timestamp(date_str).date())

    @classmethod
    def from_datetime(cls, value: datetime) -> "FinancialDate":
        """Drop the time component of a timestamp."""
        return cls(date=value.date())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def to_report_string(self) -> str:
        """Format as M/D/YYYY for printed reports."""
        return format_report_date(self.date)

    def __str__(self) -> str:
        """String representation."""
        return self.to_iso_string()

    def __repr__(self) -> str:
        """Repr format."""
        return f"FinancialDate(date={self.date!r})"


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp or date string.

    A trailing "Z" is accepted as UTC. Offset-aware values are converted to
    naive UTC so they compare with plain dates, which become midnight.

    Raises:
        ValueError: If the string is not ISO formatted
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_report_date(value: date | datetime) -> str:
    """Format a date as M/D/YYYY (no zero padding)."""
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.month}/{value.day}/{value.year}"


def days_between(start: datetime, end: datetime) -> int:
    """
    Whole days from start to end, rounding any partial day up.

    Example:
        days_between(datetime(2024, 1, 1, 9), datetime(2024, 1, 3, 10)) -> 3
    """
    return math.ceil((end - start).total_seconds() / 86400)
