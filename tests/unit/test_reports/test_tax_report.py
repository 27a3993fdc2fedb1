#!/usr/bin/env python3
"""Tests for narrative tax reports."""

from datetime import date, datetime

import pytest

from autotrackr.core.models import Category
from autotrackr.ledger.totals import compute_totals
from autotrackr.reports.summary import FlipReportData
from autotrackr.reports.tax_report import (
    build_aggregate_tax_report,
    build_flip_tax_report,
    format_roi,
    generate_aggregate_tax_report,
    generate_flip_tax_report,
)

GENERATED = date(2024, 6, 1)


def test_format_roi():
    assert format_roi(0.771428) == "77.14%"
    assert format_roi(0.0) == "0.00%"
    assert format_roi(-1.0) == "-100.00%"


@pytest.mark.reports
class TestFlipTaxReport:
    """Test the single-flip tax report."""

    def test_section_order(self, civic, civic_items):
        doc = build_flip_tax_report(
            civic, civic_items, compute_totals(civic, civic_items), tax_year=2024, generated_on=GENERATED
        )

        assert doc.headings == [
            "VEHICLE INFORMATION:",
            "FINANCIAL SUMMARY:",
            "TAX IMPLICATIONS:",
            "DETAILED EXPENSES:",
            "EXPENSE SUMMARY BY CATEGORY:",
            "IMPORTANT NOTES:",
        ]

    def test_financial_summary(self, civic, civic_items):
        doc = build_flip_tax_report(
            civic, civic_items, compute_totals(civic, civic_items), tax_year=2024, generated_on=GENERATED
        )
        summary = doc.section("FINANCIAL SUMMARY:")

        assert summary.find("Purchase Price") == "$3,500.00"
        assert summary.find("Sale Price") == "$6,200.00"
        assert summary.find("Total Expenses") == "$414.49"
        assert summary.find("Total Investment") == "$3,914.49"
        assert summary.find("Gross Profit/Loss") == "$2,285.51"
        assert summary.find("ROI") == "58.39%"
        assert doc.section("TAX IMPLICATIONS:").find("Taxable Amount") == "$2,285.51"

    def test_vehicle_information(self, civic, civic_items):
        doc = build_flip_tax_report(
            civic, civic_items, compute_totals(civic, civic_items), tax_year=2024, generated_on=GENERATED
        )
        vehicle = doc.section("VEHICLE INFORMATION:")

        assert vehicle.find("Vehicle") == "2012 Honda Civic"
        assert vehicle.find("Miles") == "85,000"
        assert vehicle.find("Purchase Date") == "3/1/2024"
        assert vehicle.find("Sale Date") == "5/1/2024"
        assert vehicle.find("Days to Sell") == "61"

    def test_itemized_expenses_grouped(self, civic, civic_items):
        doc = build_flip_tax_report(
            civic, civic_items, compute_totals(civic, civic_items), tax_year=2024, generated_on=GENERATED
        )
        table = [row.cells for row in doc.section("DETAILED EXPENSES:").rows if len(row.cells) == 4]

        assert table[1] == ("Purchase", "Vehicle Purchase", "$3,500.00", "3/1/2024")
        assert [cells[1] for cells in table[2:]] == [
            "Battery",
            "Brake pads",
            "Detailing",
            "Title transfer",
            "Air freshener",
        ]
        assert table[3] == ("parts", "Brake pads", "$89.50", "Not specified")
        assert table[-1][0] == "misc"

        by_category = doc.section("EXPENSE SUMMARY BY CATEGORY:")
        assert [row.label for row in by_category.rows] == ["Parts", "Labor", "Fees", "Miscellaneous"]
        assert by_category.find("Parts") == "$214.50"

    def test_misc_and_uncategorized_share_table_label(self, make_flip, make_item):
        flip = make_flip(buy=1000)
        items = [
            make_item(1, "Shop supplies", 20, Category.MISC),
            make_item(2, "Air freshener", "4.99"),
        ]

        doc = build_flip_tax_report(flip, items, compute_totals(flip, items), tax_year=2024, generated_on=GENERATED)
        table = [row.cells for row in doc.section("DETAILED EXPENSES:").rows if len(row.cells) == 4]

        assert [cells[0] for cells in table[2:]] == ["misc", "misc"]
        by_category = doc.section("EXPENSE SUMMARY BY CATEGORY:")
        assert by_category.find("Misc") == "$20.00"
        assert by_category.find("Miscellaneous") == "$4.99"

    def test_open_flip(self, make_flip, make_item):
        flip = make_flip(buy=1000)
        items = [make_item(1, "Tow", 75, Category.FEES)]

        text = generate_flip_tax_report(flip, items, compute_totals(flip, items), generated_on=GENERATED)

        assert "Tax Year: 2024\n" in text
        assert "Vehicle: Vehicle Flip\n" in text
        assert "VIN: Not provided\n" in text
        assert "Miles: Not provided\n" in text
        assert "Sale Date" not in text
        assert "Sale Price: $0.00\n" in text
        assert "Gross Profit/Loss: -$1,075.00\n" in text
        assert "Taxable Amount: $0.00\n" in text
        assert "Fees: $75.00\n" in text
        assert "Parts:" not in text

    def test_text_layout_start(self, civic, civic_items):
        text = generate_flip_tax_report(
            civic, civic_items, compute_totals(civic, civic_items), tax_year=2023, generated_on=GENERATED
        )

        assert text.startswith(
            "TAX REPORT - VEHICLE FLIP\n"
            "Generated: 6/1/2024\n"
            "Tax Year: 2023\n"
            "=================================\n"
            "\n"
            "VEHICLE INFORMATION:\n"
        )
        assert "Purchase\tVehicle Purchase\t$3,500.00\t3/1/2024\n" in text
        assert "TOTAL EXPENSES: $414.49\n" in text
        assert text.endswith("- Consider quarterly estimated tax payments for significant gains\n")

    def test_idempotent(self, civic, civic_items):
        totals = compute_totals(civic, civic_items)
        first = generate_flip_tax_report(civic, civic_items, totals, generated_on=GENERATED)
        second = generate_flip_tax_report(civic, civic_items, totals, generated_on=GENERATED)
        assert first == second


@pytest.mark.reports
class TestAggregateTaxReport:
    """Test the all-flips tax report."""

    @pytest.fixture
    def entries(self, civic, civic_items, make_flip, make_item):
        loser = make_flip(2, buy=1000, sell=900, sold_date=datetime(2024, 6, 1))
        ranger = make_flip(3, buy=2800, year=2008, make="Ford", model="Ranger")
        ranger_items = [
            make_item(10, "Tires", "240.50", flip_id=3),
            make_item(11, "Inspection", 30, Category.FEES, flip_id=3, created_at=datetime(2024, 4, 2)),
        ]
        return [
            FlipReportData.build(civic, civic_items),
            FlipReportData.build(loser, []),
            FlipReportData.build(ranger, ranger_items),
        ]

    def test_executive_summary(self, entries):
        doc = build_aggregate_tax_report(entries, 2024, generated_on=GENERATED)
        summary = doc.section("EXECUTIVE SUMMARY:")

        assert summary.find("Total Vehicles Flipped") == "3"
        assert summary.find("Total Sales Revenue") == "$7,100.00"
        assert summary.find("Total Purchase Cost") == "$7,300.00"
        assert summary.find("Total Operating Expenses") == "$684.99"
        assert summary.find("Total Profit") == "$2,285.51"
        assert summary.find("Total Loss") == "$3,170.50"
        assert summary.find("Net Gain/Loss") == "-$884.99"

    def test_section_order(self, entries):
        headings = build_aggregate_tax_report(entries, 2024, generated_on=GENERATED).headings

        assert headings[:3] == ["EXECUTIVE SUMMARY:", "TAX TREATMENT:", "DETAILED VEHICLE-BY-VEHICLE BREAKDOWN:"]
        assert "VEHICLE 1: 2012 Honda Civic" in headings
        assert "VEHICLE 2: Vehicle 2" in headings
        assert "VEHICLE 3: 2008 Ford Ranger" in headings
        assert headings[-3:] == [
            "COMBINED EXPENSE SUMMARY BY CATEGORY:",
            "TAX PREPARATION CHECKLIST:",
            "IMPORTANT TAX NOTES:",
        ]

    def test_combined_categories(self, entries):
        doc = build_aggregate_tax_report(entries, 2024, generated_on=GENERATED)
        combined = doc.section("COMBINED EXPENSE SUMMARY BY CATEGORY:")

        assert [(row.label, row.value) for row in combined.rows] == [
            ("Parts", "$214.50"),
            ("Labor", "$150.00"),
            ("Fees", "$75.00"),
            ("Miscellaneous", "$245.49"),
        ]

    def test_vehicle_breakdown_text(self, entries):
        text = generate_aggregate_tax_report(entries, 2024, generated_on=GENERATED)

        assert "Sale Date: Not sold\n" in text
        assert "PARTS: $214.50\n" in text
        assert "  • Battery: $125.00 (3/4/2024)\n" in text
        assert "  • Brake pads: $89.50 (3/1/2024)\n" in text
        assert "  • Inspection: $30.00 (4/2/2024)\n" in text
        assert "MISCELLANEOUS: $240.50\n" in text
        assert "ROI: -10.00%\n" in text
        assert "□ Keep all purchase receipts and contracts\n" in text

    def test_flip_without_items_has_no_breakdown(self, entries):
        doc = build_aggregate_tax_report(entries[1:2], 2024, generated_on=GENERATED)
        assert "EXPENSE BREAKDOWN:" not in doc.headings

    def test_no_flips(self):
        text = generate_aggregate_tax_report([], 2024, generated_on=GENERATED)

        assert "Total Vehicles Flipped: 0\n" in text
        assert "Net Gain/Loss: $0.00\n" in text
        assert "VEHICLE 1" not in text

    def test_idempotent(self, entries):
        assert generate_aggregate_tax_report(entries, 2024, generated_on=GENERATED) == generate_aggregate_tax_report(
            entries, 2024, generated_on=GENERATED
        )
