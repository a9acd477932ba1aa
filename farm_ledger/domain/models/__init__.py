"""Domain models package."""

from .aggregates import (
    CategoryAggregate,
    MonthlyAggregate,
    SubCategoryAggregate,
    SubCategoryBreakdown,
)
from .pagination import Page
from .transactions import (
    TransactionFilters,
    TransactionRecord,
    TransactionSummary,
)
from .views import ExpenseChartsView, TransactionsView

__all__ = [
    "CategoryAggregate",
    "MonthlyAggregate",
    "SubCategoryAggregate",
    "SubCategoryBreakdown",
    "Page",
    "TransactionFilters",
    "TransactionRecord",
    "TransactionSummary",
    "ExpenseChartsView",
    "TransactionsView",
]
