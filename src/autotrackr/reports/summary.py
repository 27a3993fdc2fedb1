#!/usr/bin/env python3
"""
Report Aggregation

Groups line items by category and accumulates figures across flips for the
export and tax reports. Everything here works on already-computed totals.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..core.models import CATEGORY_ORDER, Category, Flip, FlipTotals, LineItem
from ..core.money import Money, sum_money
from ..ledger.totals import compute_totals


@dataclass(frozen=True)
class FlipReportData:
    """A flip with its line items and computed totals."""

    flip: Flip
    line_items: Sequence[LineItem]
    totals: FlipTotals

    @classmethod
    def build(cls, flip: Flip, line_items: Sequence[LineItem]) -> "FlipReportData":
        """Compute totals for a flip and bundle them with its data."""
        return cls(flip=flip, line_items=list(line_items), totals=compute_totals(flip, line_items))

    @property
    def invested(self) -> Money:
        return self.flip.buy_price + self.totals.total_cost


@dataclass(frozen=True)
class AggregateSummary:
    """Totals across every flip in a report."""

    total_flips: int
    total_sales: Money
    total_purchases: Money
    total_expenses: Money
    total_profit: Money
    total_loss: Money

    @property
    def net_gain_loss(self) -> Money:
        return self.total_profit - self.total_loss


@dataclass(frozen=True)
class CategoryGroup:
    """Line items of one category, in input order, with their subtotal."""

    category: Category
    items: tuple[LineItem, ...]

    @property
    def subtotal(self) -> Money:
        return sum_money([item.amount for item in self.items])


def summarize_flips(entries: Iterable[FlipReportData]) -> AggregateSummary:
    """
    Accumulate sales, purchases, expenses, profit and loss across flips.

    A profitable flip adds its profit to total_profit; any other flip adds
    the size of its loss to total_loss. Unsold flips count zero sales.
    """
    count = 0
    sales = purchases = expenses = profit = loss = Money.zero()
    for entry in entries:
        count += 1
        sales += entry.flip.sell_price or Money.zero()
        purchases += entry.flip.buy_price
        expenses += entry.totals.total_cost
        if entry.totals.profit.is_positive():
            profit += entry.totals.profit
        else:
            loss += entry.totals.profit.abs()
    return AggregateSummary(
        total_flips=count,
        total_sales=sales,
        total_purchases=purchases,
        total_expenses=expenses,
        total_profit=profit,
        total_loss=loss,
    )


def group_by_category(line_items: Iterable[LineItem]) -> list[CategoryGroup]:
    """
    Group line items by category.

    Groups follow CATEGORY_ORDER with uncategorized items last. Items keep
    their input order within a group. Empty groups are omitted.
    """
    buckets: dict[Category, list[LineItem]] = {category: [] for category in (*CATEGORY_ORDER, Category.NONE)}
    for item in line_items:
        buckets[item.category].append(item)
    return [CategoryGroup(category, tuple(items)) for category, items in buckets.items() if items]


def category_grand_totals(entries: Iterable[FlipReportData]) -> list[tuple[Category, Money]]:
    """
    Per-category expense totals across all flips.

    Same ordering as group_by_category; a category appears only when at
    least one line item falls in it.
    """
    all_items = [item for entry in entries for item in entry.line_items]
    return [(group.category, group.subtotal) for group in group_by_category(all_items)]
