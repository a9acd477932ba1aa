"""Ordering of transaction collections for tabular views."""

from collections.abc import Iterable
from functools import cmp_to_key
import locale
from typing import Any

from farm_ledger.domain.constants import ASCENDING, DESCENDING
from farm_ledger.domain.models import TransactionRecord
from farm_ledger.utils.decimal_utils import is_real_number


SORTABLE_FIELDS = (
    "id",
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


def compare_values(left: Any, right: Any) -> int:
    """Compare two field values for sorting.

    Numeric pairs compare numerically. Anything else compares the
    locale-collated, case-folded string forms.

    Returns:
        int: Negative, zero or positive like a classic ``cmp``.
    """
    if is_real_number(left) and is_real_number(right):
        return (left > right) - (left < right)
    left_key = _collation_key(left)
    right_key = _collation_key(right)
    return (left_key > right_key) - (left_key < right_key)


def _collation_key(value: Any) -> str:
    return locale.strxfrm(str(value).casefold())


def sort_records(
    records: Iterable[TransactionRecord],
    field: str = "date",
    direction: str = DESCENDING,
) -> list[TransactionRecord]:
    """Return a new list ordered by ``field``.

    Args:
        records: Validated records.
        field: Attribute to sort on, one of ``SORTABLE_FIELDS``.
        direction: ``"asc"`` or ``"desc"``.

    Returns:
        list[TransactionRecord]: Sorted copy; ties keep their input order.

    Raises:
        ValueError: If the field or direction is unknown.
    """
    if field not in SORTABLE_FIELDS:
        raise ValueError(f"Unsupported sort field: {field}")
    if direction not in (ASCENDING, DESCENDING):
        raise ValueError(
            f"Unsupported sort direction: {direction}. Expected asc or desc."
        )
    value_key = cmp_to_key(compare_values)
    return sorted(
        records,
        key=lambda record: value_key(getattr(record, field)),
        reverse=direction == DESCENDING,
    )


def toggle_sort(
    current_field: str,
    current_direction: str,
    clicked_field: str,
) -> tuple[str, str]:
    """Return the sort state after a column header click.

    Clicking the active column flips its direction; another column starts
    ascending.
    """
    if clicked_field == current_field:
        flipped = ASCENDING if current_direction == DESCENDING else DESCENDING
        return current_field, flipped
    return clicked_field, ASCENDING


__all__ = ["SORTABLE_FIELDS", "compare_values", "sort_records", "toggle_sort"]
