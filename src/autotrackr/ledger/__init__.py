"""
Ledger Package

Totals calculation, quick-entry parsing and flip duplication for vehicle
flips, plus a loader for JSON ledger snapshots.

Key Components:
- compute_totals / compute_what_if_totals: Total cost, profit and ROI
- parse_quick_entry: "$150-25 - new battery" -> amount and title
- duplicate_flip: Copy a flip and its line items onto new ids
- load_ledger: Read flips and line items from a JSON file
"""

from .duplication import duplicate_flip
from .loader import Ledger, LedgerFormatError, load_ledger, parse_flip, parse_line_item
from .quick_entry import (
    DEFAULT_TITLE,
    ExpressionError,
    ParseErrorKind,
    QuickEntry,
    QuickEntryError,
    evaluate_expression,
    parse_quick_entry,
)
from .totals import (
    FlipNotFoundError,
    compute_totals,
    compute_what_if_totals,
    invested_amount,
    total_cost,
)

__all__ = [
    "DEFAULT_TITLE",
    "ExpressionError",
    "FlipNotFoundError",
    "Ledger",
    "LedgerFormatError",
    "ParseErrorKind",
    "QuickEntry",
    "QuickEntryError",
    "compute_totals",
    "compute_what_if_totals",
    "duplicate_flip",
    "evaluate_expression",
    "invested_amount",
    "load_ledger",
    "parse_flip",
    "parse_line_item",
    "parse_quick_entry",
    "total_cost",
]
