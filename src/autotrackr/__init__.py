"""
AutoTrackr Flip Ledger

Financial engine for tracking vehicle flips: totals and ROI for each flip,
quick-entry parsing of expense shorthand, and CSV / tax-report exports for
bookkeeping.

Domain Packages:
- core: Money, dates, Flip/LineItem models, configuration
- ledger: Totals calculator, quick-entry parser, duplication, ledger loader
- reports: CSV exports and narrative tax reports
- cli: Command-line interface (autotrackr)

Example Usage:
    from autotrackr.ledger import compute_totals, parse_quick_entry
    from autotrackr.reports import FlipReportData, generate_aggregate_report
"""

__version__ = "0.3.0"
__author__ = "AutoTrackr"

from .core.config import Environment, get_config
from .core.models import Category, Flip, FlipTotals, LineItem
from .core.money import Money

__all__ = [
    "Category",
    "Environment",
    "Flip",
    "FlipTotals",
    "LineItem",
    "Money",
    "get_config",
]
