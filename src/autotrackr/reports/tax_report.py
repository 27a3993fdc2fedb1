#!/usr/bin/env python3
"""
Tax Report Generator

Narrative plain-text reports for tax preparation, for a single flip or for
all flips together. Section order is fixed:

1. Header (title, generation date, tax year)
2. Vehicle identification, or the executive summary for all flips
3. Financial summary
4. Tax classification note (static guidance, not a legal conclusion)
5. Itemized expenses grouped by category with subtotals
6. Notes (and, for all flips, combined category totals and a checklist)
"""

from collections.abc import Sequence
from datetime import date

from ..core.dates import format_report_date
from ..core.models import Flip, FlipTotals, LineItem
from ..core.money import Money
from .document import ReportDocument, ReportRow, ReportSection, render_text
from .summary import FlipReportData, category_grand_totals, group_by_category, summarize_flips

WIDE_RULE = "=" * 80

SINGLE_FLIP_NOTES = (
    "This report is for tax preparation purposes",
    "Consult with a qualified tax professional",
    "Keep all receipts and supporting documentation",
    "Vehicle flipping may require business license in some jurisdictions",
    "Consider quarterly estimated tax payments for significant gains",
)

TAX_CHECKLIST = (
    "Keep all purchase receipts and contracts",
    "Keep all sale receipts and contracts",
    "Keep all receipts for parts, labor, and fees",
    "Document any business mileage related to vehicle viewing/transport",
    "Consider if this activity requires a business license",
    "Determine if you need to make quarterly estimated tax payments",
    "Consult with a tax professional for proper classification",
    "Consider Schedule C filing if this is a regular business activity",
)

AGGREGATE_NOTES = (
    "This report is for tax preparation purposes only",
    "Vehicle flipping may be considered business income vs. capital gains",
    "Consult with a qualified tax professional",
    "Keep detailed records and receipts for all transactions",
    "Consider sales tax obligations in your state",
    "Some states require dealer licenses for multiple vehicle sales",
    "Report all gains - the IRS may have records of vehicle sales",
)


def format_roi(roi: float) -> str:
    """ROI ratio as a percentage with two decimals: 0.7714 -> '77.14%'."""
    return f"{roi * 100:.2f}%"


def _miles(flip: Flip) -> str:
    return f"{flip.miles:,}" if flip.miles is not None else "Not provided"


def _header(title: str, rule: str, generated_on: date, tax_year: int) -> list[ReportRow]:
    return [
        ReportRow.text(title),
        ReportRow.field("Generated", format_report_date(generated_on)),
        ReportRow.field("Tax Year", str(tax_year)),
        ReportRow.text(rule),
    ]


def _add_financials(section: ReportSection, entry: FlipReportData, expenses_label: str, profit_label: str) -> None:
    flip, totals = entry.flip, entry.totals
    section.add_field("Purchase Price", str(flip.buy_price))
    section.add_field("Sale Price", str(flip.sell_price or Money.zero()))
    section.add_field(expenses_label, str(totals.total_cost))
    section.add_field("Total Investment", str(entry.invested))
    section.add_field(profit_label, str(totals.profit))
    section.add_field("ROI", format_roi(totals.roi))


def build_flip_tax_report(
    flip: Flip,
    line_items: Sequence[LineItem],
    totals: FlipTotals,
    *,
    tax_year: int,
    generated_on: date,
) -> ReportDocument:
    """Assemble the single-flip tax report document."""
    entry = FlipReportData(flip=flip, line_items=list(line_items), totals=totals)
    doc = ReportDocument(header=_header("TAX REPORT - VEHICLE FLIP", "=" * 33, generated_on, tax_year))

    vehicle = doc.add_section("VEHICLE INFORMATION:")
    vehicle.add_field("Vehicle", flip.display_name or "Vehicle Flip")
    vehicle.add_field("VIN", flip.vin or "Not provided")
    vehicle.add_field("Miles", _miles(flip))
    vehicle.add_field("Purchase Date", format_report_date(flip.created_at))
    if flip.sold_date is not None:
        vehicle.add_field("Sale Date", format_report_date(flip.sold_date))
        vehicle.add_field("Days to Sell", str(flip.days_to_sell))

    _add_financials(doc.add_section("FINANCIAL SUMMARY:"), entry, "Total Expenses", "Gross Profit/Loss")

    # Flips are assumed to be held for less than a year.
    taxable = totals.profit if flip.is_sold else Money.zero()
    tax = doc.add_section("TAX IMPLICATIONS:")
    tax.add_field("Classification", "Short-term Capital Gain/Loss (assuming held < 1 year)")
    tax.add_field("Taxable Amount", str(taxable))
    tax.add_field("Note", "Consult your tax professional for proper treatment")

    groups = group_by_category(line_items)
    detail = doc.add_section("DETAILED EXPENSES:")
    detail.add_table_row("Category", "Description", "Amount", "Date")
    detail.add_text(WIDE_RULE)
    detail.add_table_row("Purchase", "Vehicle Purchase", str(flip.buy_price), format_report_date(flip.created_at))
    for group in groups:
        label = group.category.to_value() or "misc"
        for item in group.items:
            item_date = item.date.to_report_string() if item.date else "Not specified"
            detail.add_table_row(label, item.title, str(item.amount), item_date)
    detail.add_text(WIDE_RULE)
    detail.add_field("TOTAL EXPENSES", str(totals.total_cost))

    by_category = doc.add_section("EXPENSE SUMMARY BY CATEGORY:")
    for group in groups:
        by_category.add_field(group.category.label, str(group.subtotal))

    notes = doc.add_section("IMPORTANT NOTES:")
    for note in SINGLE_FLIP_NOTES:
        notes.add_text(f"- {note}")
    return doc


def _add_vehicle_breakdown(doc: ReportDocument, index: int, entry: FlipReportData) -> None:
    flip = entry.flip
    vehicle = doc.add_section(f"VEHICLE {index}: {flip.display_name or f'Vehicle {index}'}")
    vehicle.add_text("-" * 50)
    vehicle.add_field("Purchase Date", format_report_date(flip.created_at))
    vehicle.add_field("Sale Date", format_report_date(flip.sold_date) if flip.sold_date else "Not sold")
    vehicle.add_field("VIN", flip.vin or "Not provided")
    vehicle.add_field("Miles", _miles(flip))

    _add_financials(doc.add_section("FINANCIALS:"), entry, "Operating Expenses", "Profit/Loss")

    if entry.line_items:
        breakdown = doc.add_section("EXPENSE BREAKDOWN:")
        for group in group_by_category(entry.line_items):
            breakdown.add_field(group.category.label.upper(), str(group.subtotal))
            for item in group.items:
                breakdown.add_text(
                    f"• {item.title}: {item.amount} ({item.effective_date.to_report_string()})",
                    indent=2,
                )

    doc.add_section(None).add_text(WIDE_RULE)


def build_aggregate_tax_report(
    entries: Sequence[FlipReportData],
    tax_year: int,
    *,
    generated_on: date,
) -> ReportDocument:
    """Assemble the all-flips tax report document."""
    summary = summarize_flips(entries)
    doc = ReportDocument(
        header=_header("COMPLETE TAX REPORT - ALL VEHICLE FLIPS", "=" * 65, generated_on, tax_year)
    )

    executive = doc.add_section("EXECUTIVE SUMMARY:")
    executive.add_field("Total Vehicles Flipped", str(summary.total_flips))
    executive.add_field("Total Sales Revenue", str(summary.total_sales))
    executive.add_field("Total Purchase Cost", str(summary.total_purchases))
    executive.add_field("Total Operating Expenses", str(summary.total_expenses))
    executive.add_field("Total Profit", str(summary.total_profit))
    executive.add_field("Total Loss", str(summary.total_loss))
    executive.add_field("Net Gain/Loss", str(summary.net_gain_loss))

    treatment = doc.add_section("TAX TREATMENT:")
    treatment.add_field("Business Activity", "Vehicle Flipping/Resale")
    treatment.add_field("Classification", "Short-term Capital Gains (vehicles typically held < 1 year)")
    treatment.add_field("Schedule", "Report on Schedule D (Capital Gains and Losses)")
    treatment.add_field("Self-Employment", "May require Schedule C if this is a business activity")

    doc.add_section("DETAILED VEHICLE-BY-VEHICLE BREAKDOWN:").add_text(WIDE_RULE)
    for index, entry in enumerate(entries, start=1):
        _add_vehicle_breakdown(doc, index, entry)

    combined = doc.add_section("COMBINED EXPENSE SUMMARY BY CATEGORY:")
    for category, total in category_grand_totals(entries):
        combined.add_field(category.label, str(total))

    checklist = doc.add_section("TAX PREPARATION CHECKLIST:")
    for item in TAX_CHECKLIST:
        checklist.add_text(f"□ {item}")

    notes = doc.add_section("IMPORTANT TAX NOTES:")
    for note in AGGREGATE_NOTES:
        notes.add_text(f"• {note}")
    return doc


def generate_flip_tax_report(
    flip: Flip,
    line_items: Sequence[LineItem],
    totals: FlipTotals,
    *,
    tax_year: int | None = None,
    generated_on: date | None = None,
) -> str:
    """
    Narrative tax report for one flip.

    Args:
        flip: The flip
        line_items: Its line items
        totals: Totals computed for the flip
        tax_year: Year printed in the header (default: generation year)
        generated_on: Date printed in the header (default: today)

    Returns:
        Report text
    """
    generated_on = generated_on or date.today()
    doc = build_flip_tax_report(
        flip, line_items, totals, tax_year=tax_year or generated_on.year, generated_on=generated_on
    )
    return render_text(doc)


def generate_aggregate_tax_report(
    entries: Sequence[FlipReportData],
    tax_year: int,
    *,
    generated_on: date | None = None,
) -> str:
    """Narrative tax report covering every flip."""
    doc = build_aggregate_tax_report(entries, tax_year, generated_on=generated_on or date.today())
    return render_text(doc)
