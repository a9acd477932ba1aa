"""Exporters writing transactions in the canonical nine columns."""

from collections.abc import Iterable
from datetime import date
from io import BytesIO
import json

import openpyxl
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from farm_ledger.domain.constants import EXPORT_COLUMNS, EXPORT_HEADERS
from farm_ledger.domain.models import TransactionRecord
from farm_ledger.utils.decimal_utils import is_real_number


EXPORT_MEDIA_TYPES = {
    "csv": "text/csv",
    "xlsx": (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    ),
    "json": "application/json",
}

HEADER_FILL_COLOR = "FFE6F3FF"
COLUMN_WIDTHS = (12, 10, 30, 12, 15, 18, 18, 15, 30)
SHEET_TITLE = "Expenses"

# Written bare in CSV; every other column is quoted.
_UNQUOTED_FIELDS = {"date", "kind", "amount"}


def quote_csv_text(value: object) -> str:
    """Wrap a value in double quotes, doubling internal quotes."""
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def _csv_cell(field: str, value: object) -> str:
    if field in _UNQUOTED_FIELDS:
        return "" if value is None else str(value)
    return quote_csv_text(value)


def export_csv(records: Iterable[TransactionRecord]) -> str:
    """Render records as CSV text with the canonical header row."""
    lines = [",".join(EXPORT_HEADERS)]
    for record in records:
        lines.append(
            ",".join(
                _csv_cell(field, getattr(record, field))
                for field, _header in EXPORT_COLUMNS
            )
        )
    return "\n".join(lines)


def export_xlsx(records: Iterable[TransactionRecord]) -> bytes:
    """Render records as an xlsx workbook with a styled header row.

    Returns:
        bytes: Workbook content.
    """
    workbook = openpyxl.Workbook()
    worksheet = workbook.active
    worksheet.title = SHEET_TITLE

    worksheet.append(list(EXPORT_HEADERS))
    for record in records:
        row = []
        for field, _header in EXPORT_COLUMNS:
            value = getattr(record, field)
            if field == "amount" and is_real_number(value):
                value = float(value)
            row.append(value)
        worksheet.append(row)

    header_font = Font(bold=True)
    header_fill = PatternFill(
        fill_type="solid",
        start_color=HEADER_FILL_COLOR,
        end_color=HEADER_FILL_COLOR,
    )
    for cell in worksheet[1]:
        cell.font = header_font
        cell.fill = header_fill
    for index, width in enumerate(COLUMN_WIDTHS, start=1):
        worksheet.column_dimensions[get_column_letter(index)].width = width

    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def export_json(records: Iterable[TransactionRecord]) -> str:
    """Render records as an indented JSON list of API payloads."""
    return json.dumps(
        [record.to_payload() for record in records],
        indent=2,
        ensure_ascii=False,
    )


def build_export_filename(
    dataset: str,
    extension: str,
    today: date | None = None,
) -> str:
    """Return ``{dataset}_{YYYY-MM-DD}.{extension}``."""
    stamp = (today or date.today()).isoformat()
    return f"{dataset}_{stamp}.{extension}"


__all__ = [
    "EXPORT_MEDIA_TYPES",
    "HEADER_FILL_COLOR",
    "COLUMN_WIDTHS",
    "SHEET_TITLE",
    "quote_csv_text",
    "export_csv",
    "export_xlsx",
    "export_json",
    "build_export_filename",
]
