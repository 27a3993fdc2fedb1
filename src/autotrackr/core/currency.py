#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All flip and expense amounts are carried as integer cents to avoid
floating-point drift when summing line items or comparing totals.

Currency Systems:
- Internal calculations use cents: 100 cents = $1.00
- Bookkeeping exports use plain decimal strings: "1234.56"
- Narrative reports use grouped dollar strings: "$1,234.56"

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Convert decimal input through Decimal, never through float
- Round half-up when a value carries more than two decimal places
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

CENT = Decimal("0.01")


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string without symbol or grouping

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def format_currency(cents: int) -> str:
    """
    Format cents for display with a dollar sign and thousands separators.

    Examples:
        format_currency(350000) -> "$3,500.00"
        format_currency(-5000) -> "-$50.00"
    """
    sign = "-" if cents < 0 else ""
    abs_cents = abs(int(cents))
    return f"{sign}${abs_cents // 100:,}.{abs_cents % 100:02d}"


def decimal_to_cents(value: Decimal) -> int:
    """
    Round a Decimal dollar amount to whole cents (half-up).

    Example:
        decimal_to_cents(Decimal("12.345")) -> 1235
    """
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_dollars_to_cents(dollars: Union[str, int, float, Decimal]) -> int:
    """
    Parse a dollar amount to cents.

    Accepts strings with an optional "$" and "," grouping, integers, floats
    (converted through their shortest repr) and Decimals.

    Args:
        dollars: Dollar amount like "$1,234.56", "12.5", 45 or 19.99

    Returns:
        Amount in cents

    Raises:
        ValueError: If the value cannot be read as a number

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$1,234.56") -> 123456
        parse_dollars_to_cents(12.5) -> 1250
    """
    if isinstance(dollars, bool):
        raise ValueError(f"Not a currency amount: {dollars!r}")
    if isinstance(dollars, int):
        return dollars * 100
    if isinstance(dollars, float):
        dollars = repr(dollars)

    if isinstance(dollars, Decimal):
        amount = dollars
    else:
        clean = str(dollars).replace("$", "").replace(",", "").strip()
        if not clean:
            raise ValueError("Empty currency amount")
        try:
            amount = Decimal(clean)
        except InvalidOperation as e:
            raise ValueError(f"Not a currency amount: {dollars!r}") from e

    if not amount.is_finite():
        raise ValueError(f"Not a finite currency amount: {dollars!r}")
    return decimal_to_cents(amount)
