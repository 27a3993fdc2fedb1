#!/usr/bin/env python3
"""
Ledger CLI - Quick Entry and Totals

Commands for trying the quick-entry parser and inspecting a flip's totals
from a ledger file.
"""

from pathlib import Path

import click

from ..core.config import get_config
from ..core.json_utils import format_json
from ..core.money import Money
from ..ledger import (
    FlipNotFoundError,
    LedgerFormatError,
    QuickEntryError,
    compute_totals,
    compute_what_if_totals,
    invested_amount,
    load_ledger,
    parse_quick_entry,
)
from ..reports.tax_report import format_roi


@click.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def parse(text: str, as_json: bool) -> None:
    """
    Parse a quick expense entry into an amount and title.

    Examples:
      autotrackr parse "$150-25 - new battery"
      autotrackr parse "45 oil filter"
    """
    config = get_config()
    result = parse_quick_entry(text, default_title=config.reports.default_entry_title)

    if isinstance(result, QuickEntryError):
        if as_json:
            click.echo(format_json({"error": result.message, "kind": result.kind.value}))
        raise click.ClickException(result.message)

    if as_json:
        click.echo(format_json({"amount": result.amount.to_plain_str(), "title": result.title}))
        return

    click.echo(f"Amount: {result.amount}")
    click.echo(f"Title: {result.title}")


@click.command()
@click.argument("ledger_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("flip_id", type=int)
@click.option("--what-if", "what_if", help="Hypothetical sell price, e.g. 7500")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def totals(ledger_file: Path, flip_id: int, what_if: str | None, as_json: bool) -> None:
    """
    Show total cost, profit and ROI for one flip.

    Examples:
      autotrackr totals ledger.json 3
      autotrackr totals ledger.json 3 --what-if 7500
    """
    try:
        ledger = load_ledger(ledger_file)
        flip = ledger.get_flip(flip_id)
    except (LedgerFormatError, FlipNotFoundError) as e:
        raise click.ClickException(str(e)) from e

    items = ledger.items_for(flip_id)
    result = compute_totals(flip, items)

    hypothetical = None
    if what_if is not None:
        try:
            price = Money.from_dollars(what_if)
        except ValueError as e:
            raise click.ClickException(f"Invalid what-if price: {what_if}") from e
        hypothetical = compute_what_if_totals(flip, items, price)

    if as_json:
        payload = {
            "flip_id": flip.id,
            "total_cost": result.total_cost.to_plain_str(),
            "invested": invested_amount(flip, result).to_plain_str(),
            "profit": result.profit.to_plain_str(),
            "roi": result.roi,
        }
        if hypothetical is not None:
            payload["what_if"] = {
                "sell_price": price.to_plain_str(),
                "profit": hypothetical.profit.to_plain_str(),
                "roi": hypothetical.roi,
            }
        click.echo(format_json(payload))
        return

    click.echo(f"{flip.display_name or f'Flip {flip.id}'}")
    click.echo("=" * 40)
    click.echo(f"  Buy Price: {flip.buy_price}")
    click.echo(f"  Sell Price: {flip.sell_price if flip.sell_price is not None else 'Not sold'}")
    click.echo(f"  Line Items: {len(items)}")
    click.echo(f"  Total Cost: {result.total_cost}")
    click.echo(f"  Invested: {invested_amount(flip, result)}")
    click.echo(f"  Profit: {result.profit}")
    click.echo(f"  ROI: {format_roi(result.roi)}")
    if flip.days_to_sell is not None:
        click.echo(f"  Days to Sell: {flip.days_to_sell}")

    if hypothetical is not None:
        difference = hypothetical.profit - result.profit
        sign = "+" if difference.cents > 0 else ""
        click.echo(f"\nWhat-if at {price}:")
        click.echo(f"  Profit: {hypothetical.profit} ({sign}{difference})")
        click.echo(f"  ROI: {format_roi(hypothetical.roi)}")
