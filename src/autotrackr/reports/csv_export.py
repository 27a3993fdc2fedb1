#!/usr/bin/env python3
"""
CSV Export

Delimited exports for bookkeeping: one flip with its expenses, or every flip
with a summary table and a detailed line item table. Currency cells carry no
symbol or grouping; absent optional fields are empty cells.
"""

from collections.abc import Sequence
from datetime import date

from ..core.dates import format_report_date
from ..core.models import Flip, FlipTotals, LineItem
from ..core.money import Money
from .document import ReportDocument, ReportRow, render_csv
from .summary import FlipReportData

UNTITLED = "Untitled Flip"


def _cell(value: object | None) -> str:
    if value is None:
        return ""
    if isinstance(value, Money):
        return value.to_plain_str()
    return str(value)


def _roi_cell(totals: FlipTotals) -> str:
    return f"{totals.roi * 100:.1f}%"


def _sold_cell(flip: Flip) -> str:
    return flip.sold_date.date().isoformat() if flip.sold_date else ""


def _item_date_cell(item: LineItem) -> str:
    return item.date.to_iso_string() if item.date else ""


def build_flip_csv(
    flip: Flip,
    line_items: Sequence[LineItem],
    totals: FlipTotals,
    *,
    generated_on: date,
    app_name: str = "AutoTrackr",
) -> ReportDocument:
    """Assemble the single-flip export document."""
    doc = ReportDocument(
        header=[
            ReportRow.text(f"{app_name} Export - {flip.display_name or UNTITLED}"),
            ReportRow.text(f"Generated: {format_report_date(generated_on)}"),
        ]
    )

    vehicle = doc.add_section("Vehicle Information")
    vehicle.add_table_row("Year", "Make", "Model", "VIN", "Miles", "Buy Price", "Sell Price", "Sold Date")
    vehicle.add_table_row(
        _cell(flip.year),
        _cell(flip.make),
        _cell(flip.model),
        _cell(flip.vin),
        _cell(flip.miles),
        _cell(flip.buy_price),
        _cell(flip.sell_price),
        _sold_cell(flip),
    )

    expenses = doc.add_section("Expenses")
    expenses.add_table_row("Title", "Amount", "Category", "Date")
    for item in line_items:
        expenses.add_table_row(
            item.title,
            _cell(item.amount),
            _cell(item.category.to_value()),
            _item_date_cell(item),
        )

    summary = doc.add_section("Totals")
    summary.add_table_row("Total Cost", _cell(flip.buy_price + totals.total_cost))
    summary.add_table_row("Expenses", _cell(totals.total_cost))
    summary.add_table_row("Profit", _cell(totals.profit))
    summary.add_table_row("ROI", _roi_cell(totals))
    return doc


def build_all_flips_csv(
    entries: Sequence[FlipReportData],
    *,
    generated_on: date,
    app_name: str = "AutoTrackr",
) -> ReportDocument:
    """Assemble the all-flips export document."""
    doc = ReportDocument(
        header=[
            ReportRow.text(f"{app_name} - All Flips Export"),
            ReportRow.text(f"Generated: {format_report_date(generated_on)}"),
        ]
    )

    flips = doc.add_section(None)
    flips.add_table_row(
        "Flip ID", "Year", "Make", "Model", "VIN", "Miles", "Buy Price", "Sell Price", "Sold Date",
        "Total Cost", "Profit", "ROI",
    )
    for entry in entries:
        flip = entry.flip
        flips.add_table_row(
            str(flip.id),
            _cell(flip.year),
            _cell(flip.make),
            _cell(flip.model),
            _cell(flip.vin),
            _cell(flip.miles),
            _cell(flip.buy_price),
            _cell(flip.sell_price),
            _sold_cell(flip),
            _cell(entry.invested),
            _cell(entry.totals.profit),
            _roi_cell(entry.totals),
        )

    details = doc.add_section("Detailed Line Items")
    details.add_table_row("Flip ID", "Vehicle", "Title", "Amount", "Category", "Date")
    for entry in entries:
        name = entry.flip.display_name or UNTITLED
        for item in entry.line_items:
            details.add_table_row(
                str(entry.flip.id),
                name,
                item.title,
                _cell(item.amount),
                _cell(item.category.to_value()),
                _item_date_cell(item),
            )
    return doc


def generate_flip_csv(
    flip: Flip,
    line_items: Sequence[LineItem],
    totals: FlipTotals,
    *,
    generated_on: date | None = None,
    app_name: str = "AutoTrackr",
) -> str:
    """
    CSV export of one flip.

    Args:
        flip: The flip
        line_items: Its line items, in display order
        totals: Totals computed for the flip
        generated_on: Date printed in the header (default: today)
        app_name: Product name printed in the header

    Returns:
        CSV text
    """
    doc = build_flip_csv(
        flip, line_items, totals, generated_on=generated_on or date.today(), app_name=app_name
    )
    return render_csv(doc)


def generate_all_flips_csv(
    entries: Sequence[FlipReportData],
    *,
    generated_on: date | None = None,
    app_name: str = "AutoTrackr",
) -> str:
    """CSV export of every flip plus all of their line items."""
    doc = build_all_flips_csv(entries, generated_on=generated_on or date.today(), app_name=app_name)
    return render_csv(doc)
