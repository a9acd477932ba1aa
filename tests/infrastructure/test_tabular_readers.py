"""Tests for the CSV and spreadsheet readers."""

from datetime import datetime
from io import BytesIO

import openpyxl
import pytest

from farm_ledger.domain.errors import ImportFailedError, UnsupportedFileTypeError
from farm_ledger.infrastructure.tabular_readers import (
    read_csv_rows,
    read_spreadsheet_rows,
    read_tabular_file,
)


def _workbook_bytes(rows) -> bytes:
    workbook = openpyxl.Workbook()
    worksheet = workbook.active
    for row in rows:
        worksheet.append(row)
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def test_read_csv_rows_handles_quotes_and_short_rows():
    text = (
        "\ufeffDate,Description,Amount,Notes\n"
        '2024-01-15,"Hay, 20 bales","1,200","He said ""cash"""\n'
        "\n"
        "2024-01-16,Salt lick\n"
    )

    rows = read_csv_rows(text)

    assert rows == [
        {
            "Date": "2024-01-15",
            "Description": "Hay, 20 bales",
            "Amount": "1,200",
            "Notes": 'He said "cash"',
        },
        {
            "Date": "2024-01-16",
            "Description": "Salt lick",
            "Amount": "",
            "Notes": "",
        },
    ]


def test_read_csv_rows_without_data_rows():
    assert read_csv_rows("") == []
    assert read_csv_rows("Date,Amount\n") == []


def test_read_spreadsheet_rows_uses_first_row_as_header():
    content = _workbook_bytes(
        [
            ["Date", "Type", "Amount", None],
            [datetime(2024, 1, 15), "Income", 15000, None],
            [None, None, None, None],
            ["2024-01-10", "Expense", 2500.5, None],
        ]
    )

    rows = read_spreadsheet_rows(content)

    assert rows == [
        {"Date": datetime(2024, 1, 15), "Type": "Income", "Amount": 15000},
        {"Date": "2024-01-10", "Type": "Expense", "Amount": 2500.5},
    ]


def test_read_tabular_file_dispatches_on_extension():
    csv_rows = read_tabular_file("FARM.CSV", b"Amount\n5\n")
    xlsx_rows = read_tabular_file(
        "farm.xlsx", _workbook_bytes([["Amount"], [5]])
    )

    assert csv_rows == [{"Amount": "5"}]
    assert xlsx_rows == [{"Amount": 5}]


def test_read_tabular_file_rejects_unknown_extensions():
    with pytest.raises(UnsupportedFileTypeError):
        read_tabular_file("farm.pdf", b"%PDF")


def test_unsupported_type_is_an_import_failure():
    with pytest.raises(ImportFailedError):
        read_tabular_file("farm.txt", b"")


def test_corrupt_spreadsheet_raises_import_failed():
    with pytest.raises(ImportFailedError) as excinfo:
        read_tabular_file("legacy.xls", b"\xd0\xcf\x11\xe0 not a zip")

    assert excinfo.value.__cause__ is not None


def test_undecodable_csv_raises_import_failed():
    with pytest.raises(ImportFailedError):
        read_tabular_file("farm.csv", b"Amount\n\xff\xfe\xfa")
