#!/usr/bin/env python3
"""
Export CLI - CSV and Tax Reports

Generates bookkeeping CSV exports and tax-preparation reports from a ledger
file and writes them to the export directory (or stdout).
"""

import logging
from datetime import date, datetime
from pathlib import Path

import click

from ..core.config import get_config
from ..core.json_utils import write_text
from ..ledger import FlipNotFoundError, Ledger, LedgerFormatError, load_ledger
from ..reports import (
    FlipReportData,
    ReportKind,
    generate_aggregate_report,
    generate_flip_report,
    report_filename,
)

logger = logging.getLogger(__name__)


def _load(ledger_file: Path) -> Ledger:
    try:
        return load_ledger(ledger_file)
    except LedgerFormatError as e:
        raise click.ClickException(str(e)) from e


def _parse_date(date_str: str | None) -> date:
    if not date_str:
        return date.today()
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise click.ClickException(f"Invalid date format: {date_str}. Use YYYY-MM-DD")


def _render(
    ledger: Ledger,
    kind: ReportKind,
    flip_id: int | None,
    generated_on: date,
    tax_year: int | None,
) -> tuple[str, str]:
    """Generate report text and its default file name."""
    app_name = get_config().reports.app_name

    if flip_id is not None:
        try:
            flip = ledger.get_flip(flip_id)
        except FlipNotFoundError as e:
            raise click.ClickException(str(e)) from e
        entry = FlipReportData.build(flip, ledger.items_for(flip_id))
        content = generate_flip_report(
            entry.flip,
            entry.line_items,
            entry.totals,
            kind=kind,
            tax_year=tax_year,
            generated_on=generated_on,
            app_name=app_name,
        )
        name = flip.display_name or ("flip" if kind is ReportKind.CSV else "Vehicle")
        return content, report_filename(kind, name, tax_year or generated_on.year if kind is ReportKind.TAX else None)

    if not ledger.flips:
        raise click.ClickException("No flips to export")

    entries = [FlipReportData.build(flip, ledger.items_for(flip.id)) for flip in ledger.flips]
    content = generate_aggregate_report(
        entries, tax_year, kind=kind, generated_on=generated_on, app_name=app_name
    )
    return content, report_filename(kind, None, tax_year or generated_on.year if kind is ReportKind.TAX else None)


def _emit(content: str, output: str | None, default_name: str) -> None:
    if output == "-":
        click.echo(content, nl=False)
        return

    target = Path(output) if output else get_config().output_dir / default_name
    write_text(target, content)
    logger.info("Wrote %d characters to %s", len(content), target)
    click.echo(f"✅ Exported to {target}")


@click.group()
def export() -> None:
    """Export flips as CSV or tax reports."""
    pass


@export.command("csv")
@click.argument("ledger_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--flip-id", type=int, help="Export a single flip (default: all flips)")
@click.option("--output", "-o", help="Output file, or '-' for stdout (default: export directory)")
@click.option("--date", "date_str", help="Generation date printed in the header (YYYY-MM-DD, default: today)")
def export_csv(ledger_file: Path, flip_id: int | None, output: str | None, date_str: str | None) -> None:
    """
    Export flips and line items as CSV.

    Examples:
      autotrackr export csv ledger.json
      autotrackr export csv ledger.json --flip-id 3 -o civic.csv
    """
    ledger = _load(ledger_file)
    content, default_name = _render(ledger, ReportKind.CSV, flip_id, _parse_date(date_str), None)
    _emit(content, output, default_name)


@export.command("tax")
@click.argument("ledger_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--flip-id", type=int, help="Report on a single flip (default: all flips)")
@click.option("--tax-year", type=int, help="Tax year printed in the report (default: configured or current year)")
@click.option("--output", "-o", help="Output file, or '-' for stdout (default: export directory)")
@click.option("--date", "date_str", help="Generation date printed in the header (YYYY-MM-DD, default: today)")
def export_tax(
    ledger_file: Path,
    flip_id: int | None,
    tax_year: int | None,
    output: str | None,
    date_str: str | None,
) -> None:
    """
    Generate a tax-preparation report.

    Examples:
      autotrackr export tax ledger.json --tax-year 2024
      autotrackr export tax ledger.json --flip-id 3 -o -
    """
    ledger = _load(ledger_file)
    year = tax_year or get_config().reports.tax_year
    content, default_name = _render(ledger, ReportKind.TAX, flip_id, _parse_date(date_str), year)
    _emit(content, output, default_name)
