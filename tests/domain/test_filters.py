"""Tests for transaction filters."""

from farm_ledger.domain.models import TransactionFilters
from farm_ledger.domain.services.filters import apply_filters, distinct_values


def _records(record_factory):
    return [
        record_factory("1", description="Goat sale", kind="Income",
                       category="Sales", date="2024-01-15"),
        record_factory("2", description="Vet visit", notes="Goat fever",
                       category="Healthcare", payer="Manager",
                       date="2024-02-10"),
        record_factory("3", description="Fodder", category="Feed",
                       source="UPI", date="2024-03-01"),
    ]


def test_no_filters_returns_everything(record_factory):
    records = _records(record_factory)

    assert apply_filters(records, None) == records
    assert apply_filters(records, TransactionFilters()) == records


def test_search_matches_description_and_notes(record_factory):
    records = _records(record_factory)

    matched = apply_filters(records, TransactionFilters(search="GOAT"))

    assert [r.id for r in matched] == ["1", "2"]


def test_exact_filters_combine(record_factory):
    records = _records(record_factory)

    assert [r.id for r in apply_filters(
        records, TransactionFilters(kind="Expense", source="UPI")
    )] == ["3"]
    assert [r.id for r in apply_filters(
        records, TransactionFilters(payer="Manager")
    )] == ["2"]
    assert apply_filters(
        records, TransactionFilters(category="Missing")
    ) == []


def test_date_bounds_are_inclusive(record_factory):
    records = _records(record_factory)

    matched = apply_filters(
        records,
        TransactionFilters(date_from="2024-02-10", date_to="2024-03-01"),
    )

    assert [r.id for r in matched] == ["2", "3"]


def test_distinct_values_sorted_without_blanks(record_factory):
    records = _records(record_factory) + [record_factory("4", category="")]

    assert distinct_values(records, "category") == [
        "Feed",
        "Healthcare",
        "Sales",
    ]
