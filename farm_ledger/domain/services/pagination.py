"""Pagination of sorted collections."""

from collections.abc import Sequence
from dataclasses import dataclass, replace
import math
from typing import TypeVar

from farm_ledger.domain.constants import DEFAULT_PAGE_SIZE
from farm_ledger.domain.models import Page

T = TypeVar("T")


def validate_page_size(page_size: int) -> int:
    """Return the page size or raise when it is not a positive integer."""
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ValueError(f"Page size must be an integer, got {page_size!r}")
    if page_size <= 0:
        raise ValueError(f"Page size must be positive, got {page_size}")
    return page_size


def count_pages(total: int, page_size: int) -> int:
    """Return ``ceil(total / page_size)``."""
    return math.ceil(total / validate_page_size(page_size))


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a requested page into ``[1, total_pages]``.

    An empty collection has zero pages and always resolves to page 1.
    """
    if total_pages <= 0:
        return 1
    return max(1, min(page, total_pages))


def paginate(records: Sequence[T], page_size: int, page: int = 1) -> Page[T]:
    """Slice one page out of a sorted collection.

    Args:
        records: Sorted records.
        page_size: Records per page.
        page: Requested 1-indexed page; clamped to the valid range so a
            collection that shrank never yields an empty trailing page.

    Returns:
        Page: Page items and bounds.
    """
    total = len(records)
    total_pages = count_pages(total, page_size)
    effective_page = clamp_page(page, total_pages)
    start = (effective_page - 1) * page_size
    return Page(
        items=list(records[start:start + page_size]),
        page=effective_page,
        page_size=page_size,
        total=total,
        total_pages=total_pages,
    )


@dataclass(frozen=True)
class PaginationState:
    """Page navigation state kept by interactive views.

    Transitions return new states and never point past the last page of
    the collection they were given.
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def resolve(self, total: int) -> "PaginationState":
        """Return the state with its page clamped for ``total`` records."""
        total_pages = count_pages(total, self.page_size)
        return replace(self, page=clamp_page(self.page, total_pages))

    def go_to_page(self, page: int, total: int) -> "PaginationState":
        """Jump to ``page`` when it exists, otherwise stay put."""
        total_pages = count_pages(total, self.page_size)
        if 1 <= page <= total_pages:
            return replace(self, page=page)
        return self.resolve(total)

    def next_page(self, total: int) -> "PaginationState":
        return self.go_to_page(self.page + 1, total)

    def previous_page(self, total: int) -> "PaginationState":
        return self.go_to_page(self.page - 1, total)

    def change_page_size(self, page_size: int) -> "PaginationState":
        """Switch page size and go back to the first page."""
        return PaginationState(page=1, page_size=validate_page_size(page_size))

    def apply(self, records: Sequence[T]) -> Page[T]:
        return paginate(records, self.page_size, self.page)


__all__ = [
    "validate_page_size",
    "count_pages",
    "clamp_page",
    "paginate",
    "PaginationState",
]
