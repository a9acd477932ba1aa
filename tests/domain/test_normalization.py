"""Tests for the import normalizer."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from farm_ledger.domain.services.normalization import (
    normalize_date,
    normalize_kind,
    normalize_row,
    normalize_rows,
    parse_amount,
    resolve_field,
)

TODAY = date(2024, 7, 1)


def test_minimal_rows_get_defaults():
    rows = [
        {"Date": "2024-01-15", "Type": "Income",
         "Description": "Goat Sale", "Amount": "15000"},
        {"Date": "2024-01-10", "Type": "Expense",
         "Description": "Vet Visit", "Amount": "2500"},
    ]

    records = normalize_rows(rows, batch_stamp=42, today=TODAY)

    assert [r.kind for r in records] == ["Income", "Expense"]
    assert [r.amount for r in records] == [Decimal("15000"), Decimal("2500")]
    assert all(r.category == "Other" for r in records)
    assert all(r.sub_category == "General" for r in records)
    assert all(r.payer == "Unknown" and r.source == "Unknown"
               for r in records)
    assert all(r.notes == "" for r in records)
    assert [r.id for r in records] == ["imported_42_0", "imported_42_1"]


def test_header_aliases_follow_priority_order():
    row = {
        "Transaction Date": "2024-02-02",
        "date": "",
        "Particulars": "Fence wire",
        "Value": "1,250.50",
        "Payer": "Manager",
        "Expense Category": "Infrastructure",
        "Sub Category": "Fencing",
        "Payment Method": "UPI",
        "Remarks": "Paid half upfront",
    }

    record = normalize_row(row, 3, batch_stamp=1, today=TODAY)

    assert record.date == "2024-02-02"
    assert record.description == "Fence wire"
    assert record.amount == Decimal("1250.50")
    assert record.payer == "Manager"
    assert record.category == "Infrastructure"
    assert record.sub_category == "Fencing"
    assert record.source == "UPI"
    assert record.notes == "Paid half upfront"


def test_resolve_field_skips_blank_values():
    row = {"Date": "  ", "DATE": "2024-03-03"}

    assert resolve_field(row, "date") == "2024-03-03"
    assert resolve_field({}, "notes") is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-15", "2024-01-15"),
        ("2024/01/15", "2024-01-15"),
        ("15/01/2024", "2024-01-15"),
        ("01/15/2024", "2024-01-15"),
        ("03/04/2024", "2024-03-04"),
        ("12/11/2023", "2023-12-11"),
        ("15-01-2024", "2024-01-15"),
        ("15 Jan 2024", "2024-01-15"),
        ("Jan 15, 2024", "2024-01-15"),
        ("2024-01-15T08:30:00", "2024-01-15"),
        (datetime(2024, 1, 15, 9, 0), "2024-01-15"),
        (date(2024, 1, 15), "2024-01-15"),
    ],
)
def test_normalize_date_formats(value, expected):
    assert normalize_date(value, TODAY) == expected


@pytest.mark.parametrize("value", [None, "", "someday", "31/31/2024", 45000])
def test_unparseable_dates_fall_back_to_today(value):
    assert normalize_date(value, TODAY) == "2024-07-01"


def test_normalize_kind():
    assert normalize_kind("income") == "Income"
    assert normalize_kind(" INCOME ") == "Income"
    assert normalize_kind("Expense") == "Expense"
    assert normalize_kind("refund") == "Expense"
    assert normalize_kind(None) == "Expense"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1500, Decimal("1500")),
        (12.5, Decimal("12.5")),
        ("₹1,200", Decimal("1200")),
        ("Rs. 450.75", Decimal("450.75")),
        ("$ 99", Decimal("99")),
        ("300abc", Decimal("300")),
        ("-250", Decimal("250")),
        ("abc", Decimal("0")),
        ("", Decimal("0")),
        (None, Decimal("0")),
        (float("nan"), Decimal("0")),
        ("inf", Decimal("0")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


def test_short_rows_default_missing_fields():
    row = {"Date": "2024-01-01", "Type": "", "Description": "", "Amount": ""}

    record = normalize_row(row, 0, batch_stamp=7, today=TODAY)

    assert record.kind == "Expense"
    assert record.description == "Imported transaction"
    assert record.amount == Decimal("0")


def test_ids_unique_within_batch():
    rows = [{"Amount": str(i)} for i in range(50)]

    records = normalize_rows(rows, batch_stamp=99, today=TODAY)

    assert len({r.id for r in records}) == 50
    assert all(r.date == "2024-07-01" for r in records)


def test_spreadsheet_cell_types_are_stringified():
    row = {"Date": datetime(2024, 4, 1), "Amount": 320, "Notes": 12}

    record = normalize_row(row, 0, batch_stamp=1, today=TODAY)

    assert record.date == "2024-04-01"
    assert record.amount == Decimal("320")
    assert record.notes == "12"
