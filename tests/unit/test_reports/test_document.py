#!/usr/bin/env python3
"""Tests for the report document model and renderers."""

import pytest

from autotrackr.reports.document import ReportDocument, ReportRow, RowKind, render_csv, render_text


@pytest.fixture
def document():
    doc = ReportDocument(header=[ReportRow.text("TITLE"), ReportRow.field("Generated", "1/2/2024")])
    summary = doc.add_section("SUMMARY:")
    summary.add_field("Profit", "$1,000.00")
    summary.add_text("• note", indent=2)
    table = doc.add_section(None)
    table.add_table_row("Title", "Amount")
    table.add_table_row('Tires, "used"', "240.50")
    return doc


@pytest.mark.reports
class TestReportDocument:
    """Test structure lookups."""

    def test_lookup(self, document):
        assert document.headings == ["SUMMARY:"]
        assert document.section("SUMMARY:").find("Profit") == "$1,000.00"
        assert document.section("SUMMARY:").find("Loss") is None

    def test_missing_section(self, document):
        with pytest.raises(KeyError):
            document.section("NOPE")

    def test_row_kinds(self):
        assert ReportRow.field("a", "b").kind is RowKind.FIELD
        assert ReportRow.field("a", "b").label == "a"
        assert ReportRow.text("x").label is None
        assert ReportRow.table("x", "y").value == "x\ty"


@pytest.mark.reports
class TestRenderers:
    """Test text and CSV serialization."""

    def test_render_text(self, document):
        assert render_text(document) == (
            "TITLE\n"
            "Generated: 1/2/2024\n"
            "\n"
            "SUMMARY:\n"
            "Profit: $1,000.00\n"
            "  • note\n"
            "\n"
            "Title\tAmount\n"
            'Tires, "used"\t240.50\n'
        )

    def test_render_csv_quotes_when_needed(self, document):
        assert render_csv(document) == (
            "TITLE\n"
            "Generated,1/2/2024\n"
            "\n"
            "SUMMARY:\n"
            'Profit,"$1,000.00"\n'
            "• note\n"
            "\n"
            "Title,Amount\n"
            '"Tires, ""used""",240.50\n'
        )

    def test_rendering_is_repeatable(self, document):
        assert render_text(document) == render_text(document)
        assert render_csv(document) == render_csv(document)
