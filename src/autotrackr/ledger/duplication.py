#!/usr/bin/env python3
"""
Flip duplication.

Copies a flip's vehicle details and buy price into a new open flip and
deep-copies its line items onto it. Identifier allocation stays with the
record store, so callers pass the ids to use.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime

from ..core.models import Flip, LineItem

logger = logging.getLogger(__name__)


def duplicate_flip(
    flip: Flip,
    line_items: Iterable[LineItem],
    *,
    new_flip_id: int,
    item_ids: Iterable[int],
    now: datetime | None = None,
) -> tuple[Flip, list[LineItem]]:
    """
    Create a copy of a flip and its expenses.

    The copy keeps year, make, model, VIN, miles and buy price. Sale price
    and sold date are cleared. Line items keep title, amount, category and
    incurred date, in their original order.

    Args:
        flip: Flip to copy
        line_items: The flip's line items
        new_flip_id: Identifier for the new flip
        item_ids: Identifiers for the copied line items, consumed in order
        now: Creation timestamp for the copies (default: current time)

    Returns:
        Tuple of the new flip and its new line items

    Raises:
        ValueError: If item_ids runs out before every line item is copied
    """
    now = now or datetime.now()
    new_flip = replace(
        flip,
        id=new_flip_id,
        sell_price=None,
        sold_date=None,
        created_at=now,
        updated_at=now,
    )

    ids = iter(item_ids)
    new_items: list[LineItem] = []
    for item in line_items:
        try:
            new_id = next(ids)
        except StopIteration:
            raise ValueError(f"Not enough identifiers to copy line items of flip {flip.id}") from None
        new_items.append(
            replace(item, id=new_id, flip_id=new_flip_id, created_at=now, updated_at=now)
        )

    logger.info("Duplicated flip %s -> %s with %d line items", flip.id, new_flip_id, len(new_items))
    return new_flip, new_items
