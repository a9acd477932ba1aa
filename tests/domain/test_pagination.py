"""Tests for the paginator and pagination state."""

import pytest

from farm_ledger.domain.services.pagination import (
    PaginationState,
    clamp_page,
    count_pages,
    paginate,
    validate_page_size,
)
from farm_ledger.domain.services.sorting import sort_records


def test_twenty_three_records_split_ten_ten_three(record_factory):
    records = [record_factory(str(i)) for i in range(23)]

    sizes = [len(paginate(records, 10, page).items) for page in (1, 2, 3)]

    assert sizes == [10, 10, 3]


def test_page_beyond_last_clamps_to_last(record_factory):
    records = [record_factory(str(i)) for i in range(23)]

    page = paginate(records, 10, 5)

    assert page.page == 3
    assert page.total_pages == 3
    assert [r.id for r in page.items] == ["20", "21", "22"]


def test_pages_reconstruct_sorted_collection(record_factory):
    records = [
        record_factory(str(i), date=f"2024-02-{(i % 28) + 1:02d}")
        for i in range(37)
    ]
    ordered = sort_records(records, "date")
    total_pages = count_pages(len(ordered), 5)

    rebuilt = []
    for number in range(1, total_pages + 1):
        rebuilt.extend(paginate(ordered, 5, number).items)

    assert rebuilt == ordered


def test_empty_collection_yields_first_empty_page():
    page = paginate([], 10, 4)

    assert page.page == 1
    assert page.items == []
    assert page.total == 0
    assert page.total_pages == 0
    assert page.has_next_page is False
    assert page.has_previous_page is False


def test_page_below_one_clamps_to_first(record_factory):
    page = paginate([record_factory("1")], 10, 0)

    assert page.page == 1


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_page_size_raises(size):
    with pytest.raises(ValueError):
        validate_page_size(size)


def test_any_positive_page_size_is_accepted(record_factory):
    records = [record_factory(str(i)) for i in range(7)]

    page = paginate(records, 3, 3)

    assert [r.id for r in page.items] == ["6"]


def test_clamp_page_helpers():
    assert clamp_page(9, 3) == 3
    assert clamp_page(2, 0) == 1
    assert count_pages(0, 10) == 0
    assert count_pages(21, 10) == 3


def test_state_clamps_after_collection_shrinks(record_factory):
    """Deleting the tail of the data moves the view to the new last page."""
    state = PaginationState(page=3, page_size=10)
    records = [record_factory(str(i)) for i in range(15)]

    resolved = state.resolve(len(records))

    assert resolved.page == 2
    assert resolved.apply(records).items == records[10:]


def test_state_navigation(record_factory):
    state = PaginationState(page=1, page_size=10)

    state = state.next_page(25)
    assert state.page == 2
    state = state.next_page(25).next_page(25)
    assert state.page == 3
    state = state.previous_page(25)
    assert state.page == 2
    assert state.go_to_page(99, 25).page == 2


def test_change_page_size_resets_to_first_page():
    state = PaginationState(page=4, page_size=5)

    changed = state.change_page_size(20)

    assert changed == PaginationState(page=1, page_size=20)
    assert state.page == 4
