"""Shared record builders for domain tests."""

from decimal import Decimal

import pytest

from farm_ledger.domain.models import TransactionRecord


def make_record(
    record_id: str = "1",
    *,
    date: str = "2024-01-15",
    kind: str = "Expense",
    description: str = "Feed purchase",
    amount=Decimal("100"),
    payer: str = "Farm Owner",
    category: str = "Feed",
    sub_category: str = "Fodder",
    source: str = "Cash",
    notes: str = "",
) -> TransactionRecord:
    return TransactionRecord(
        id=record_id,
        date=date,
        kind=kind,
        description=description,
        amount=amount,
        payer=payer,
        category=category,
        sub_category=sub_category,
        source=source,
        notes=notes,
    )


@pytest.fixture
def record_factory():
    return make_record
