"""Shared fixtures for bill-split tests."""

from decimal import Decimal

import pytest

from bill_split.config import Settings
from bill_split.models import Bill, PersonalItem, SharedItem


@pytest.fixture
def settings(monkeypatch):
    """Settings isolated from the developer's environment."""
    monkeypatch.delenv("BILL_SPLIT_DEFAULT_TIP_PERCENTAGE", raising=False)
    monkeypatch.delenv("BILL_SPLIT_LOG_LEVEL", raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def dinner_bill():
    """Two diners with personal mains and a shared starter, 10% tip."""
    return Bill(
        date="2024-03-15",
        location="Lan Fong Yuen",
        tip_percentage=Decimal("10"),
        items=[
            PersonalItem(price=Decimal("60"), name="Steak", person="A"),
            PersonalItem(price=Decimal("40"), name="Pasta", person="B"),
            SharedItem(price=Decimal("100"), name="Platter"),
        ],
    )
