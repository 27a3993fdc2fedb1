"""
Reports Package

Bookkeeping and tax-preparation exports built from flips, their line items
and computed totals. Reports are assembled as structured documents and
serialized to text as the last step; writing or sharing the text is up to
the caller.

Key Components:
- csv_export: Single-flip and all-flips CSV
- tax_report: Narrative tax reports
- summary: Category grouping and cross-flip aggregation
- document: Section/row document model and its renderers
"""

from .csv_export import build_all_flips_csv, build_flip_csv, generate_all_flips_csv, generate_flip_csv
from .document import ReportDocument, ReportRow, ReportSection, RowKind, render_csv, render_text
from .generator import ReportKind, generate_aggregate_report, generate_flip_report, report_filename
from .summary import (
    AggregateSummary,
    CategoryGroup,
    FlipReportData,
    category_grand_totals,
    group_by_category,
    summarize_flips,
)
from .tax_report import (
    build_aggregate_tax_report,
    build_flip_tax_report,
    format_roi,
    generate_aggregate_tax_report,
    generate_flip_tax_report,
)

__all__ = [
    "AggregateSummary",
    "CategoryGroup",
    "FlipReportData",
    "ReportDocument",
    "ReportKind",
    "ReportRow",
    "ReportSection",
    "RowKind",
    "build_aggregate_tax_report",
    "build_all_flips_csv",
    "build_flip_csv",
    "build_flip_tax_report",
    "category_grand_totals",
    "format_roi",
    "generate_aggregate_report",
    "generate_aggregate_tax_report",
    "generate_all_flips_csv",
    "generate_flip_csv",
    "generate_flip_report",
    "generate_flip_tax_report",
    "group_by_category",
    "render_csv",
    "render_text",
    "report_filename",
    "summarize_flips",
]
