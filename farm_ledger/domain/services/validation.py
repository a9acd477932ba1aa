"""Domain validation helpers."""

from collections.abc import Iterable
from typing import Any

from farm_ledger.domain.models import TransactionRecord
from farm_ledger.utils.decimal_utils import is_finite_amount


def is_valid_record(record: Any) -> bool:
    """Return True when a record may reach tables and charts.

    Args:
        record: Record-shaped object, possibly malformed.

    Returns:
        bool: True for a non-empty string id and a finite numeric amount.
    """
    if record is None:
        return False
    record_id = getattr(record, "id", None)
    if not isinstance(record_id, str) or not record_id:
        return False
    return is_finite_amount(getattr(record, "amount", None))


def filter_valid_records(
    records: Iterable[TransactionRecord],
) -> list[TransactionRecord]:
    """Return the well-formed records, preserving order.

    Duplicate ids pass through. Dropped records are not reported; callers
    compare lengths to count them.
    """
    return [record for record in records if is_valid_record(record)]


__all__ = ["is_valid_record", "filter_valid_records"]
