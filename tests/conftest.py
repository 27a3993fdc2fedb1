"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import json
from datetime import datetime
from pathlib import Path

import pytest

from autotrackr.core.dates import FinancialDate
from autotrackr.core.models import Category, Flip, LineItem
from autotrackr.core.money import Money

CREATED = datetime(2024, 3, 1, 10, 0, 0)


@pytest.fixture
def make_flip():
    """Factory for flips with sensible defaults; prices in dollars."""

    def _make_flip(
        flip_id: int = 1,
        buy: str | int = 3500,
        sell: str | int | None = None,
        sold_date: datetime | None = None,
        **kwargs,
    ) -> Flip:
        return Flip(
            id=flip_id,
            buy_price=Money.from_dollars(buy),
            sell_price=Money.from_dollars(sell) if sell is not None else None,
            sold_date=sold_date,
            created_at=kwargs.pop("created_at", CREATED),
            updated_at=kwargs.pop("updated_at", CREATED),
            **kwargs,
        )

    return _make_flip


@pytest.fixture
def make_item():
    """Factory for line items; amount in dollars."""

    def _make_item(
        item_id: int,
        title: str,
        amount: str | int,
        category: Category = Category.NONE,
        flip_id: int = 1,
        date: str | None = None,
        created_at: datetime = CREATED,
    ) -> LineItem:
        return LineItem(
            id=item_id,
            flip_id=flip_id,
            title=title,
            amount=Money.from_dollars(amount),
            category=category,
            date=FinancialDate.from_string(date) if date else None,
            created_at=created_at,
            updated_at=created_at,
        )

    return _make_item


@pytest.fixture
def civic(make_flip):
    """A sold 2012 Honda Civic."""
    return make_flip(
        flip_id=1,
        buy=3500,
        sell=6200,
        sold_date=datetime(2024, 5, 1, 9, 0, 0),
        year=2012,
        make="Honda",
        model="Civic",
        vin="1HGFA16526L000001",
        miles=85000,
    )


@pytest.fixture
def civic_items(make_item):
    """Civic expenses, out of category order on purpose."""
    return [
        make_item(1, "Battery", "125.00", Category.PARTS, date="2024-03-04"),
        make_item(2, "Detailing", 150, Category.LABOR, date="2024-03-10"),
        make_item(3, "Brake pads", "89.50", Category.PARTS),
        make_item(4, "Title transfer", 45, Category.FEES, date="2024-03-02"),
        make_item(5, "Air freshener", "4.99"),
    ]


@pytest.fixture
def ledger_data() -> dict:
    """Raw ledger file content with one sold flip, one open flip and one bare flip."""
    return {
        "flips": [
            {
                "id": 1,
                "year": 2012,
                "make": "Honda",
                "model": "Civic",
                "vin": "1HGFA16526L000001",
                "miles": 85000,
                "buy_price": 3500,
                "sell_price": 6200,
                "sold_date": "2024-05-01T09:00:00.000Z",
                "created_at": "2024-03-01T10:00:00.000Z",
                "updated_at": "2024-05-01T09:00:00.000Z",
            },
            {
                "id": 2,
                "year": 2008,
                "make": "Ford",
                "model": "Ranger",
                "buy_price": "2,800.00",
                "created_at": "2024-04-01T10:00:00.000Z",
                "updated_at": "2024-04-01T10:00:00.000Z",
            },
            {
                "id": 3,
                "buy_price": 1000,
                "sell_price": 900,
                "sold_date": "2024-06-01",
                "created_at": "2024-05-15T10:00:00.000Z",
            },
        ],
        "line_items": [
            {
                "id": 2,
                "flip_id": 1,
                "title": "Detailing",
                "amount": 150,
                "category": "labor",
                "created_at": "2024-03-10T10:00:00.000Z",
            },
            {
                "id": 1,
                "flip_id": 1,
                "title": "Battery",
                "amount": "125.00",
                "category": "parts",
                "date": "2024-03-04",
                "created_at": "2024-03-04T10:00:00.000Z",
            },
            {
                "id": 3,
                "flip_id": 2,
                "title": "Tires, used",
                "amount": 240.5,
                "category": None,
                "created_at": "2024-04-02T10:00:00.000Z",
            },
        ],
    }


@pytest.fixture
def ledger_file(tmp_path: Path, ledger_data: dict) -> Path:
    """Ledger data written to a JSON file."""
    path = tmp_path / "ledger.json"
    path.write_text(json.dumps(ledger_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("AUTOTRACKR_ENV", "test")
    monkeypatch.setenv("AUTOTRACKR_DATA_DIR", "/tmp/test_autotrackr_data")
    monkeypatch.delenv("AUTOTRACKR_TAX_YEAR", raising=False)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "ledger: Tests for totals, quick entry and duplication")
    config.addinivalue_line("markers", "reports: Tests for CSV and tax report generation")
