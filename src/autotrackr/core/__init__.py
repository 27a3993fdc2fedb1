"""
Core Utilities Package

Shared primitives and data models used by the ledger and report packages.

This package provides:
- Currency handling with integer cents for precision
- Flip, LineItem and FlipTotals models with a closed Category enum
- Date primitive with report formatting
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    ReportConfig,
    get_config,
    is_test,
    reload_config,
)
from .currency import (
    cents_to_dollars_str,
    decimal_to_cents,
    format_currency,
    parse_dollars_to_cents,
)
from .dates import FinancialDate, days_between, format_report_date, parse_timestamp
from .models import CATEGORY_ORDER, Category, Flip, FlipTotals, LineItem
from .money import Money, sum_money

__all__ = [
    "CATEGORY_ORDER",
    "Category",
    # Configuration
    "Config",
    "Environment",
    "FinancialDate",
    # Data models
    "Flip",
    "FlipTotals",
    "LineItem",
    "Money",
    "ReportConfig",
    # Currency utilities
    "cents_to_dollars_str",
    "days_between",
    "decimal_to_cents",
    "format_currency",
    "format_report_date",
    "get_config",
    "is_test",
    "parse_dollars_to_cents",
    "parse_timestamp",
    "reload_config",
    "sum_money",
]
