"""View models assembled by use cases for presentation layers."""

from dataclasses import dataclass

from .aggregates import (
    CategoryAggregate,
    MonthlyAggregate,
    SubCategoryBreakdown,
)
from .pagination import Page
from .transactions import TransactionRecord, TransactionSummary


@dataclass(frozen=True)
class TransactionsView:
    """Filtered, sorted and paginated transactions with their summary.

    Attributes:
        page: Current page of validated records.
        summary: Totals over every filtered record, not just the page.
        raw_count: Size of the collection before validation.
        valid_count: Size after validation, before filtering.
    """

    page: Page[TransactionRecord]
    summary: TransactionSummary
    raw_count: int
    valid_count: int

    @property
    def dropped_count(self) -> int:
        """Return how many records the validator excluded."""
        return self.raw_count - self.valid_count


@dataclass(frozen=True)
class ExpenseChartsView:
    """Aggregates backing the expense charts.

    Attributes:
        category_totals: Every expense category, descending by amount.
        top_categories: Top categories plus a merged ``Other`` slice.
        monthly: Trailing twelve months, chronological.
        sub_categories: Sub-category breakdown per category.
    """

    category_totals: list[CategoryAggregate]
    top_categories: list[CategoryAggregate]
    monthly: list[MonthlyAggregate]
    sub_categories: list[SubCategoryBreakdown]


__all__ = ["TransactionsView", "ExpenseChartsView"]
