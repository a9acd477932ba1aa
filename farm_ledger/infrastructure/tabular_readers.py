"""Readers turning uploaded CSV and spreadsheet files into raw rows.

Rows are dictionaries keyed by the header cells of the first row. Values
are left untouched (strings for CSV, typed cells for spreadsheets); the
import normalizer decides how to interpret them.
"""

import csv
from io import BytesIO, StringIO
from pathlib import PurePath
from typing import Any
import zipfile

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from farm_ledger.domain.errors import ImportFailedError, UnsupportedFileTypeError


CSV_EXTENSIONS = (".csv",)
SPREADSHEET_EXTENSIONS = (".xlsx", ".xls")


def read_csv_rows(text: str) -> list[dict[str, str]]:
    """Parse CSV text with a header row.

    Quoted fields may contain commas and doubled quotes. Short rows are
    padded with empty strings, extra cells are ignored and blank lines
    are skipped.

    Args:
        text: Decoded CSV content.

    Returns:
        list[dict[str, str]]: One mapping per data row.
    """
    reader = csv.reader(StringIO(text.lstrip("\ufeff")))
    headers: list[str] | None = None
    rows: list[dict[str, str]] = []
    for cells in reader:
        if not any(cell.strip() for cell in cells):
            continue
        if headers is None:
            headers = [cell.strip() for cell in cells]
            continue
        padded = list(cells) + [""] * (len(headers) - len(cells))
        rows.append(
            {
                header: value
                for header, value in zip(headers, padded)
                if header
            }
        )
    return rows


def read_spreadsheet_rows(content: bytes) -> list[dict[str, Any]]:
    """Read the first worksheet of a workbook.

    The first row holds the headers; empty cells and fully empty rows are
    dropped.

    Args:
        content: Raw workbook bytes.

    Returns:
        list[dict[str, Any]]: One mapping per non-empty data row.
    """
    workbook = openpyxl.load_workbook(
        BytesIO(content),
        read_only=True,
        data_only=True,
    )
    try:
        worksheet = workbook.worksheets[0]
        values = worksheet.iter_rows(values_only=True)
        header_row = next(values, None)
        if header_row is None:
            return []
        headers = [
            str(cell).strip() if cell is not None else ""
            for cell in header_row
        ]
        rows: list[dict[str, Any]] = []
        for row in values:
            row_data = {
                header: cell
                for header, cell in zip(headers, row)
                if header and cell is not None
            }
            if row_data:
                rows.append(row_data)
        return rows
    finally:
        workbook.close()


def read_tabular_file(
    filename: str,
    content: bytes | str,
) -> list[dict[str, Any]]:
    """Dispatch on the file extension and read the rows.

    Args:
        filename: Original filename.
        content: File bytes, or already-decoded text for CSV.

    Returns:
        list[dict[str, Any]]: Raw rows keyed by header.

    Raises:
        UnsupportedFileTypeError: If the extension has no reader.
        ImportFailedError: If the file cannot be decoded or parsed.
    """
    extension = PurePath(filename).suffix.lower()
    try:
        if extension in CSV_EXTENSIONS:
            text = (
                content.decode("utf-8-sig")
                if isinstance(content, bytes)
                else content
            )
            return read_csv_rows(text)
        if extension in SPREADSHEET_EXTENSIONS:
            if isinstance(content, str):
                raise ImportFailedError(
                    f"Spreadsheet {filename} must be read as bytes."
                )
            return read_spreadsheet_rows(content)
    except (
        csv.Error,
        UnicodeDecodeError,
        zipfile.BadZipFile,
        InvalidFileException,
        KeyError,
        OSError,
    ) as exc:
        raise ImportFailedError(
            f"Could not read {filename}: {exc}"
        ) from exc
    raise UnsupportedFileTypeError(
        f"Unsupported file type for {filename}. "
        "Expected .csv, .xlsx or .xls."
    )


__all__ = [
    "CSV_EXTENSIONS",
    "SPREADSHEET_EXTENSIONS",
    "read_csv_rows",
    "read_spreadsheet_rows",
    "read_tabular_file",
]
