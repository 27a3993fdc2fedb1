#!/usr/bin/env python3
"""
Report dispatch.

Entry points used by callers that pick the report variant at runtime.
"""

from collections.abc import Sequence
from datetime import date
from enum import Enum

from ..core.models import Flip, FlipTotals, LineItem
from .csv_export import generate_all_flips_csv, generate_flip_csv
from .summary import FlipReportData
from .tax_report import generate_aggregate_tax_report, generate_flip_tax_report


class ReportKind(Enum):
    """Available report formats."""

    CSV = "csv"
    TAX = "tax"

    @property
    def file_suffix(self) -> str:
        return ".csv" if self is ReportKind.CSV else ".txt"


def generate_flip_report(
    flip: Flip,
    line_items: Sequence[LineItem],
    totals: FlipTotals,
    *,
    kind: ReportKind = ReportKind.CSV,
    tax_year: int | None = None,
    generated_on: date | None = None,
    app_name: str = "AutoTrackr",
) -> str:
    """
    Report for a single flip.

    ``tax_year`` only applies to the tax variant and ``app_name`` only to CSV.
    """
    generated_on = generated_on or date.today()
    if kind is ReportKind.TAX:
        return generate_flip_tax_report(flip, line_items, totals, tax_year=tax_year, generated_on=generated_on)
    return generate_flip_csv(flip, line_items, totals, generated_on=generated_on, app_name=app_name)


def generate_aggregate_report(
    entries: Sequence[FlipReportData],
    tax_year: int | None = None,
    *,
    kind: ReportKind = ReportKind.TAX,
    generated_on: date | None = None,
    app_name: str = "AutoTrackr",
) -> str:
    """Report covering every flip; defaults to the tax variant."""
    generated_on = generated_on or date.today()
    if kind is ReportKind.TAX:
        return generate_aggregate_tax_report(entries, tax_year or generated_on.year, generated_on=generated_on)
    return generate_all_flips_csv(entries, generated_on=generated_on, app_name=app_name)


def report_filename(kind: ReportKind, display_name: str | None = None, tax_year: int | None = None) -> str:
    """
    Default export file name.

    Examples:
        report_filename(ReportKind.CSV, "2012 Honda Civic") -> "2012_Honda_Civic-export.csv"
        report_filename(ReportKind.TAX, None, 2024) -> "AutoTrackr_Complete_Tax_Report_2024.txt"
    """
    if kind is ReportKind.CSV:
        stem = display_name.replace(" ", "_") if display_name else "all-flips"
        return f"{stem}-export{kind.file_suffix}"
    year = f"_{tax_year}" if tax_year else ""
    if display_name:
        return f"{display_name.replace(' ', '_')}_Tax_Report{year}{kind.file_suffix}"
    return f"AutoTrackr_Complete_Tax_Report{year}{kind.file_suffix}"
