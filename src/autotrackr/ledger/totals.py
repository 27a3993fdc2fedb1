#!/usr/bin/env python3
"""
Flip Totals Calculator.

Derives total cost, profit and ROI for a flip from its buy/sell prices and
line items. Pure functions: nothing here queries storage or rounds results
beyond the integer-cent representation of Money.
"""

import logging
from collections.abc import Iterable

from ..core.models import Flip, FlipTotals, LineItem
from ..core.money import Money, sum_money

logger = logging.getLogger(__name__)


class FlipNotFoundError(LookupError):
    """Raised when totals are requested for a flip that does not exist."""

    def __init__(self, flip_id: int | None = None):
        self.flip_id = flip_id
        if flip_id is None:
            super().__init__("Flip not found")
        else:
            super().__init__(f"Flip not found: {flip_id}")


def _derive_totals(buy_price: Money, sell_price: Money | None, total_cost: Money) -> FlipTotals:
    invested = buy_price + total_cost
    profit = (sell_price or Money.zero()) - invested
    roi = profit.cents / invested.cents if invested.cents > 0 else 0.0
    return FlipTotals(total_cost=total_cost, profit=profit, roi=roi)


def total_cost(line_items: Iterable[LineItem]) -> Money:
    """Sum of every line item amount, regardless of category or date."""
    return sum_money([item.amount for item in line_items])


def compute_totals(flip: Flip | None, line_items: Iterable[LineItem]) -> FlipTotals:
    """
    Compute derived totals for a flip.

    Args:
        flip: The flip; an unset sell price counts as zero
        line_items: The flip's expense records

    Returns:
        FlipTotals with total_cost, profit and roi

    Raises:
        FlipNotFoundError: If flip is None
    """
    if flip is None:
        raise FlipNotFoundError()
    totals = _derive_totals(flip.buy_price, flip.sell_price, total_cost(line_items))
    logger.debug("Flip %s totals: cost=%s profit=%s roi=%.4f", flip.id, totals.total_cost, totals.profit, totals.roi)
    return totals


def compute_what_if_totals(
    flip: Flip | None,
    line_items: Iterable[LineItem],
    sell_price: Money | None = None,
) -> FlipTotals:
    """
    Recompute totals for a hypothetical sell price.

    Total cost and buy price stay fixed. Without a hypothetical price the
    flip's own sell price is used, so the result matches compute_totals.

    Raises:
        FlipNotFoundError: If flip is None
    """
    if flip is None:
        raise FlipNotFoundError()
    hypothetical = sell_price if sell_price is not None else flip.sell_price
    return _derive_totals(flip.buy_price, hypothetical, total_cost(line_items))


def invested_amount(flip: Flip, totals: FlipTotals) -> Money:
    """Buy price plus expenses: the amount ROI is measured against."""
    return flip.buy_price + totals.total_cost
