#!/usr/bin/env python3
"""
Ledger File Loader

Reads a JSON snapshot of flips and line items into domain models so the CLI
can compute totals and produce exports without a live record store.

File format::

    {
      "flips": [
        {"id": 1, "year": 2012, "make": "Honda", "model": "Civic",
         "buy_price": 3500, "sell_price": 6200, "sold_date": "2024-05-01",
         "created_at": "2024-03-01T10:00:00Z", "updated_at": "..."}
      ],
      "line_items": [
        {"id": 1, "flip_id": 1, "title": "Battery", "amount": "125.00",
         "category": "parts", "date": "2024-03-04", "created_at": "..."}
      ]
    }

Functions:
- load_ledger: Load a ledger file as a Ledger
- parse_flip / parse_line_item: Convert single records
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core.dates import FinancialDate, parse_timestamp
from ..core.json_utils import read_json
from ..core.models import Flip, LineItem
from ..core.money import Money
from .totals import FlipNotFoundError

logger = logging.getLogger(__name__)


class LedgerFormatError(ValueError):
    """Raised when a ledger file or record cannot be interpreted."""

    pass


@dataclass
class Ledger:
    """Flips in file order plus every line item."""

    flips: list[Flip] = field(default_factory=list)
    line_items: list[LineItem] = field(default_factory=list)

    def get_flip(self, flip_id: int) -> Flip:
        """
        Look up a flip by id.

        Raises:
            FlipNotFoundError: If no flip has that id
        """
        for flip in self.flips:
            if flip.id == flip_id:
                return flip
        raise FlipNotFoundError(flip_id)

    def items_for(self, flip_id: int) -> list[LineItem]:
        """Line items of one flip in ascending creation order."""
        items = [item for item in self.line_items if item.flip_id == flip_id]
        return sorted(items, key=lambda item: (item.created_at, item.id))


def _optional_str(record: dict[str, Any], key: str) -> str | None:
    value = record.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_int(record: dict[str, Any], key: str) -> int | None:
    value = record.get(key)
    if value is None or value == "":
        return None
    return int(value)


def _optional_money(record: dict[str, Any], key: str) -> Money | None:
    value = record.get(key)
    if value is None or value == "":
        return None
    return Money.from_dollars(value)


def parse_flip(record: dict[str, Any]) -> Flip:
    """
    Convert a flip record into a Flip.

    Raises:
        LedgerFormatError: If required fields are missing or malformed
    """
    try:
        created_at = parse_timestamp(record["created_at"])
        updated_raw = record.get("updated_at")
        sold_raw = _optional_str(record, "sold_date")
        return Flip(
            id=int(record["id"]),
            buy_price=Money.from_dollars(record["buy_price"]),
            created_at=created_at,
            updated_at=parse_timestamp(updated_raw) if updated_raw else created_at,
            year=_optional_int(record, "year"),
            make=_optional_str(record, "make"),
            model=_optional_str(record, "model"),
            vin=_optional_str(record, "vin"),
            miles=_optional_int(record, "miles"),
            sell_price=_optional_money(record, "sell_price"),
            sold_date=parse_timestamp(sold_raw) if sold_raw else None,
        )
    except KeyError as e:
        raise LedgerFormatError(f"Flip record {record.get('id', '?')} missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise LedgerFormatError(f"Flip record {record.get('id', '?')} is invalid: {e}") from e


def parse_line_item(record: dict[str, Any]) -> LineItem:
    """
    Convert a line item record into a LineItem.

    Raises:
        LedgerFormatError: If required fields are missing or malformed
    """
    try:
        created_at = parse_timestamp(record["created_at"])
        updated_raw = record.get("updated_at")
        date_raw = _optional_str(record, "date")
        return LineItem(
            id=int(record["id"]),
            flip_id=int(record["flip_id"]),
            title=str(record["title"]),
            amount=Money.from_dollars(record["amount"]),
            created_at=created_at,
            updated_at=parse_timestamp(updated_raw) if updated_raw else created_at,
            category=record.get("category"),
            date=FinancialDate.from_string(date_raw) if date_raw else None,
        )
    except KeyError as e:
        raise LedgerFormatError(f"Line item record {record.get('id', '?')} missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise LedgerFormatError(f"Line item record {record.get('id', '?')} is invalid: {e}") from e


def load_ledger(path: str | Path) -> Ledger:
    """
    Load a ledger JSON file.

    Line items pointing at a flip that is not in the file are rejected.

    Args:
        path: Path to the ledger file

    Returns:
        Ledger with flips in file order

    Raises:
        FileNotFoundError: If the file does not exist
        LedgerFormatError: If the content is not a valid ledger
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Ledger file not found: {path}")

    data = read_json(path)
    if not isinstance(data, dict) or not isinstance(data.get("flips", []), list):
        raise LedgerFormatError(f"{path}: expected an object with a 'flips' list")

    flips = [parse_flip(record) for record in data.get("flips", [])]
    flip_ids = {flip.id for flip in flips}
    if len(flip_ids) != len(flips):
        raise LedgerFormatError(f"{path}: duplicate flip ids")

    line_items = [parse_line_item(record) for record in data.get("line_items", [])]
    for item in line_items:
        if item.flip_id not in flip_ids:
            raise LedgerFormatError(f"Line item {item.id} refers to unknown flip {item.flip_id}")

    logger.info("Loaded %d flips and %d line items from %s", len(flips), len(line_items), path)
    return Ledger(flips=flips, line_items=line_items)
