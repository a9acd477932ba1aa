"""Domain models for paginated views."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a sorted collection.

    Attributes:
        items: Records on the page.
        page: Effective 1-indexed page number after clamping.
        page_size: Maximum number of records per page.
        total: Size of the whole collection.
        total_pages: ``ceil(total / page_size)``.
    """

    items: list[T]
    page: int
    page_size: int
    total: int
    total_pages: int

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1


__all__ = ["Page"]
