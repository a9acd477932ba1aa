"""Domain models for chart aggregates derived from transactions."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class CategoryAggregate:
    """Summed amount and record count for one category."""

    category: str
    amount: Decimal
    count: int


@dataclass(frozen=True)
class MonthlyAggregate:
    """Income and expense totals for one calendar month.

    Attributes:
        month_start: First day of the month, used for chronological order.
        month_label: Short display label such as ``"Jan 2024"``.
        income_total: Income for the month.
        expense_total: Expenses for the month.
    """

    month_start: date
    month_label: str
    income_total: Decimal
    expense_total: Decimal


@dataclass(frozen=True)
class SubCategoryAggregate:
    """Summed amount and record count for one sub-category."""

    sub_category: str
    amount: Decimal
    count: int


@dataclass(frozen=True)
class SubCategoryBreakdown:
    """Sub-category totals for a single category."""

    category: str
    sub_categories: list[SubCategoryAggregate]

    @property
    def total(self) -> Decimal:
        """Return the sum of the sub-category amounts."""
        return sum(
            (item.amount for item in self.sub_categories),
            start=Decimal("0"),
        )


__all__ = [
    "CategoryAggregate",
    "MonthlyAggregate",
    "SubCategoryAggregate",
    "SubCategoryBreakdown",
]
