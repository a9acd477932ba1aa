"""User-facing filters over transaction collections."""

from collections.abc import Iterable

from farm_ledger.domain.models import TransactionFilters, TransactionRecord


def apply_filters(
    records: Iterable[TransactionRecord],
    filters: TransactionFilters | None,
) -> list[TransactionRecord]:
    """Return the records matching every active filter, in input order.

    Args:
        records: Validated records.
        filters: Active filters; ``None`` or empty values match everything.

    Returns:
        list[TransactionRecord]: Matching records.
    """
    selected = list(records)
    if filters is None:
        return selected

    if filters.search:
        needle = filters.search.lower()
        selected = [
            record
            for record in selected
            if needle in record.description.lower()
            or needle in record.notes.lower()
        ]
    if filters.kind:
        selected = [r for r in selected if r.kind == filters.kind]
    if filters.category:
        selected = [r for r in selected if r.category == filters.category]
    if filters.payer:
        selected = [r for r in selected if r.payer == filters.payer]
    if filters.source:
        selected = [r for r in selected if r.source == filters.source]
    if filters.date_from:
        selected = [r for r in selected if r.date >= filters.date_from]
    if filters.date_to:
        selected = [r for r in selected if r.date <= filters.date_to]
    return selected


def distinct_values(
    records: Iterable[TransactionRecord],
    field: str,
) -> list[str]:
    """Return the sorted distinct non-empty values of a text field."""
    values = {getattr(record, field) for record in records}
    return sorted(value for value in values if value)


__all__ = ["apply_filters", "distinct_values"]
