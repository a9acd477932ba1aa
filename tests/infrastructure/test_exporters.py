"""Tests for the CSV, xlsx and JSON exporters."""

from datetime import date
from decimal import Decimal
from io import BytesIO
import json

import openpyxl

from farm_ledger.domain.services.normalization import normalize_rows
from farm_ledger.infrastructure.exporters import (
    COLUMN_WIDTHS,
    build_export_filename,
    export_csv,
    export_json,
    export_xlsx,
    quote_csv_text,
)
from farm_ledger.infrastructure.tabular_readers import read_csv_rows

CANONICAL_FIELDS = (
    "date",
    "kind",
    "description",
    "amount",
    "payer",
    "category",
    "sub_category",
    "source",
    "notes",
)


def test_csv_quotes_text_fields_only(record_factory):
    record = record_factory(
        "1",
        description='Bought "premium" feed, 10kg',
        amount=Decimal("450.50"),
    )

    text = export_csv([record])

    header, line = text.split("\n")
    assert header == (
        "Date,Type,Description,Amount,Paid By,Category,Sub-Category,"
        "Source,Notes"
    )
    assert line == (
        '2024-01-15,Expense,"Bought ""premium"" feed, 10kg",450.50,'
        '"Farm Owner","Feed","Fodder","Cash",""'
    )


def test_quote_csv_text():
    assert quote_csv_text('a"b') == '"a""b"'
    assert quote_csv_text(None) == '""'


def test_csv_round_trip_preserves_canonical_fields(record_factory):
    records = [
        record_factory("1", kind="Income", description="Goat Sale",
                       amount=Decimal("15000"), category="Sales",
                       sub_category="Goats", notes='Buyer said "thanks"'),
        record_factory("2", description="Vet, follow-up",
                       amount=Decimal("2500.75"), payer="Manager",
                       source="UPI", notes="Second visit"),
    ]

    imported = normalize_rows(
        read_csv_rows(export_csv(records)),
        batch_stamp=1,
        today=date(2024, 6, 1),
    )

    for original, restored in zip(records, imported):
        for field in CANONICAL_FIELDS:
            assert getattr(restored, field) == getattr(original, field)
    assert len(imported) == len(records)


def test_xlsx_header_styling_and_widths(record_factory):
    content = export_xlsx([record_factory("1", amount=Decimal("12.5"))])

    workbook = openpyxl.load_workbook(BytesIO(content))
    worksheet = workbook.active

    assert worksheet.title == "Expenses"
    header = [cell.value for cell in worksheet[1]]
    assert header[0] == "Date"
    assert header[-1] == "Notes"
    assert all(cell.font.bold for cell in worksheet[1])
    assert worksheet["A1"].fill.start_color.rgb == "FFE6F3FF"
    assert worksheet["D2"].value == 12.5
    widths = [
        worksheet.column_dimensions[letter].width for letter in "ABCDEFGHI"
    ]
    assert tuple(widths) == COLUMN_WIDTHS


def test_json_export_uses_api_shape(record_factory):
    payload = json.loads(export_json([record_factory("1", payer="Owner")]))

    assert payload == [
        {
            "id": "1",
            "date": "2024-01-15",
            "type": "Expense",
            "description": "Feed purchase",
            "amount": 100.0,
            "paidBy": "Owner",
            "category": "Feed",
            "subCategory": "Fodder",
            "source": "Cash",
            "notes": "",
        }
    ]


def test_build_export_filename():
    assert (
        build_export_filename("expenses", "xlsx", today=date(2024, 1, 31))
        == "expenses_2024-01-31.xlsx"
    )


def test_empty_export_has_only_header():
    assert export_csv([]).count("\n") == 0
    assert json.loads(export_json([])) == []
