"""Tests for the ExportTransactionsUseCase."""

from datetime import date
from decimal import Decimal
import json
from unittest.mock import MagicMock

import pytest

from farm_ledger.application.use_cases.export_transactions import (
    ExportTransactionsUseCase,
)
from farm_ledger.domain.models import TransactionFilters


def _use_case(records):
    repo = MagicMock()
    repo.fetch_transactions.return_value = records
    return ExportTransactionsUseCase(
        repo,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )


def test_csv_export_skips_malformed_and_filtered(record_factory):
    records = [
        record_factory("1", kind="Income", description="Goat Sale",
                       amount=Decimal("15000")),
        record_factory("2", description="Vet Visit", amount=Decimal("2500")),
        record_factory("3", amount=None),
    ]

    export = _use_case(records).execute(
        file_format="csv",
        filters=TransactionFilters(kind="Expense"),
        today=date(2024, 3, 9),
    )

    lines = export.content.decode("utf-8").split("\n")
    assert export.filename == "expenses_2024-03-09.csv"
    assert export.media_type == "text/csv"
    assert export.record_count == 1
    assert lines[0] == (
        "Date,Type,Description,Amount,Paid By,Category,Sub-Category,"
        "Source,Notes"
    )
    assert lines[1].startswith('2024-01-15,Expense,"Vet Visit",2500,')


def test_json_export(record_factory):
    export = _use_case([record_factory("1")]).execute(
        file_format="json",
        dataset="ledger",
        today=date(2024, 3, 9),
    )

    payload = json.loads(export.content)
    assert export.filename == "ledger_2024-03-09.json"
    assert payload[0]["id"] == "1"
    assert payload[0]["type"] == "Expense"


def test_xlsx_export_returns_workbook_bytes(record_factory):
    export = _use_case([record_factory("1")]).execute(
        file_format="xlsx",
        today=date(2024, 3, 9),
    )

    assert export.filename.endswith(".xlsx")
    assert export.content[:2] == b"PK"


def test_unknown_format_raises(record_factory):
    with pytest.raises(ValueError):
        _use_case([record_factory("1")]).execute(file_format="pdf")
