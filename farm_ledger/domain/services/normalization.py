"""Normalization of imported spreadsheet rows into transaction records.

Header resolution is table-driven: each canonical field lists the header
names it accepts, in priority order, and the first present, non-empty value
wins. Missing or unparseable values fall back to per-field defaults; rows
are never rejected.

Unparseable dates silently become the import date.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
import re
import time
from typing import Any

from farm_ledger.domain.constants import EXPENSE, IMPORT_DEFAULTS, INCOME
from farm_ledger.domain.models import TransactionRecord
from farm_ledger.utils.decimal_utils import coerce_decimal, is_real_number


HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "date": ("Date", "date", "DATE", "Transaction Date", "transaction_date"),
    "kind": ("Type", "type", "TYPE", "Transaction Type", "Income/Expense"),
    "description": (
        "Description",
        "description",
        "DESCRIPTION",
        "Particulars",
        "Details",
        "Narration",
    ),
    "amount": ("Amount", "amount", "AMOUNT", "Value", "Sum", "Total"),
    "payer": (
        "Paid By",
        "paid by",
        "PAID BY",
        "PaidBy",
        "paidBy",
        "Payer",
        "Person",
    ),
    "category": (
        "Category",
        "category",
        "CATEGORY",
        "Expense Category",
        "Type Category",
    ),
    "sub_category": (
        "Sub-Category",
        "sub-category",
        "SUB-CATEGORY",
        "SubCategory",
        "subCategory",
        "Sub Category",
    ),
    "source": (
        "Source",
        "source",
        "SOURCE",
        "Payment Method",
        "Mode",
        "Account",
    ),
    "notes": ("Notes", "notes", "NOTES", "Remarks", "Comments"),
}

DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%d-%m-%Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
)

_AMOUNT_PREFIX = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_AMOUNT_NOISE = re.compile(r"[,\s₹$€£]|Rs\.?|INR", re.IGNORECASE)


def resolve_field(row: Mapping[str, Any], field: str) -> Any | None:
    """Return the first present, non-empty value among a field's headers.

    Args:
        row: Raw row keyed by header name.
        field: Canonical field name, a key of ``HEADER_ALIASES``.

    Returns:
        The raw cell value, or None when no accepted header has a value.
    """
    for header in HEADER_ALIASES[field]:
        value = row.get(header)
        if _is_present(value):
            return value
    return None


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def normalize_date(value: Any, today: date) -> str:
    """Return the value as ``YYYY-MM-DD``, or ``today`` when unparseable."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        text = value.strip()
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date().isoformat()
            except ValueError:
                continue
        try:
            return datetime.fromisoformat(text).date().isoformat()
        except ValueError:
            pass
    return today.isoformat()


def normalize_kind(value: Any) -> str:
    """Return Income when the value reads "income", Expense otherwise."""
    if value is not None and str(value).strip().lower() == "income":
        return INCOME
    return EXPENSE


def parse_amount(value: Any) -> Decimal:
    """Parse an amount cell, falling back to zero.

    Currency symbols and thousands separators are ignored and only the
    leading numeric part of a string is read. Signs are dropped since the
    transaction kind carries the direction.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if is_real_number(value):
        amount = coerce_decimal(value)
    else:
        match = _AMOUNT_PREFIX.match(_AMOUNT_NOISE.sub("", str(value)))
        if match is None:
            return Decimal("0")
        try:
            amount = Decimal(match.group(0))
        except InvalidOperation:
            return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return abs(amount)


def _text(value: Any, field: str) -> str:
    if value is None:
        return IMPORT_DEFAULTS[field]
    return str(value)


def normalize_row(
    row: Mapping[str, Any],
    index: int,
    *,
    batch_stamp: int,
    today: date,
) -> TransactionRecord:
    """Convert one raw row into a canonical record.

    Args:
        row: Raw row keyed by header name.
        index: Ordinal of the row within the import batch.
        batch_stamp: Batch identifier shared by every row of the import.
        today: Fallback date for missing or unparseable dates.

    Returns:
        TransactionRecord: Record with every field populated.
    """
    return TransactionRecord(
        id=f"imported_{batch_stamp}_{index}",
        date=normalize_date(resolve_field(row, "date"), today),
        kind=normalize_kind(resolve_field(row, "kind")),
        description=_text(resolve_field(row, "description"), "description"),
        amount=parse_amount(resolve_field(row, "amount")),
        payer=_text(resolve_field(row, "payer"), "payer"),
        category=_text(resolve_field(row, "category"), "category"),
        sub_category=_text(
            resolve_field(row, "sub_category"),
            "sub_category",
        ),
        source=_text(resolve_field(row, "source"), "source"),
        notes=_text(resolve_field(row, "notes"), "notes"),
    )


def normalize_rows(
    rows: Iterable[Mapping[str, Any]],
    *,
    batch_stamp: int | None = None,
    today: date | None = None,
) -> list[TransactionRecord]:
    """Convert raw rows into canonical records.

    Args:
        rows: Raw rows keyed by header name.
        batch_stamp: Batch identifier; defaults to the current time in
            milliseconds.
        today: Fallback date; defaults to the current date.

    Returns:
        list[TransactionRecord]: One record per row, ids unique in the batch.
    """
    stamp = batch_stamp if batch_stamp is not None else current_batch_stamp()
    reference = today or date.today()
    return [
        normalize_row(row, index, batch_stamp=stamp, today=reference)
        for index, row in enumerate(rows)
    ]


def current_batch_stamp() -> int:
    """Return the current time in milliseconds."""
    return time.time_ns() // 1_000_000


__all__ = [
    "HEADER_ALIASES",
    "DATE_FORMATS",
    "resolve_field",
    "normalize_date",
    "normalize_kind",
    "parse_amount",
    "normalize_row",
    "normalize_rows",
    "current_batch_stamp",
]
