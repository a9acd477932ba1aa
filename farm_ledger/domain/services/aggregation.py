"""Domain services deriving chart aggregates from transactions.

Every function is pure: it reads a validated snapshot and returns new
frozen aggregates. Empty input yields empty output.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from farm_ledger.domain.constants import (
    EXPENSE,
    INCOME,
    MONTHLY_WINDOW_MONTHS,
    NO_DESCRIPTION_PLACEHOLDER,
    OTHER_CATEGORY,
    TOP_CATEGORY_LIMIT,
)
from farm_ledger.domain.models import (
    CategoryAggregate,
    MonthlyAggregate,
    SubCategoryAggregate,
    SubCategoryBreakdown,
    TransactionRecord,
    TransactionSummary,
)
from farm_ledger.utils.decimal_utils import coerce_decimal


_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def is_chartable_expense(record: TransactionRecord) -> bool:
    """Return True for positive expenses with a real description."""
    description = record.description or ""
    return (
        record.kind == EXPENSE
        and coerce_decimal(record.amount) > 0
        and description.strip() != ""
        and description != NO_DESCRIPTION_PLACEHOLDER
    )


def is_categorised_expense(record: TransactionRecord) -> bool:
    """Return True for chartable expenses outside the catch-all category."""
    return is_chartable_expense(record) and record.category != OTHER_CATEGORY


def compute_category_totals(
    records: Iterable[TransactionRecord],
) -> list[CategoryAggregate]:
    """Group categorised expenses by category.

    Args:
        records: Validated records.

    Returns:
        list[CategoryAggregate]: One entry per category, descending by
        amount.
    """
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for record in records:
        if not is_categorised_expense(record):
            continue
        amount = coerce_decimal(record.amount)
        totals[record.category] = (
            totals.get(record.category, Decimal("0")) + amount
        )
        counts[record.category] = counts.get(record.category, 0) + 1

    aggregates = [
        CategoryAggregate(
            category=category,
            amount=amount,
            count=counts[category],
        )
        for category, amount in totals.items()
    ]
    return sorted(aggregates, key=lambda item: item.amount, reverse=True)


def group_top_categories(
    category_totals: list[CategoryAggregate],
    limit: int = TOP_CATEGORY_LIMIT,
) -> list[CategoryAggregate]:
    """Keep the ``limit`` largest categories and merge the rest.

    Args:
        category_totals: Categories sorted descending by amount.
        limit: Number of categories kept individually.

    Returns:
        list[CategoryAggregate]: Top categories, followed by a synthetic
        ``Other`` entry when anything was merged.
    """
    top_items = list(category_totals[:limit])
    other_items = category_totals[limit:]
    if other_items:
        top_items.append(
            CategoryAggregate(
                category=OTHER_CATEGORY,
                amount=sum(
                    (item.amount for item in other_items),
                    start=Decimal("0"),
                ),
                count=sum(item.count for item in other_items),
            )
        )
    return top_items


def compute_monthly_totals(
    records: Iterable[TransactionRecord],
    today: date | None = None,
) -> list[MonthlyAggregate]:
    """Sum chartable expenses per calendar month over the trailing year.

    Income totals are reported as zero: the monthly chart tracks expenses
    only.

    Args:
        records: Validated records.
        today: Reference date for the twelve-month window.

    Returns:
        list[MonthlyAggregate]: One entry per month with expenses, oldest
        first.
    """
    reference = today or date.today()
    cutoff = subtract_months(reference, MONTHLY_WINDOW_MONTHS)
    totals: dict[date, Decimal] = {}
    for record in records:
        if not is_chartable_expense(record):
            continue
        record_date = parse_iso_date(record.date)
        if record_date is None or record_date < cutoff:
            continue
        month_start = record_date.replace(day=1)
        totals[month_start] = (
            totals.get(month_start, Decimal("0"))
            + coerce_decimal(record.amount)
        )

    return [
        MonthlyAggregate(
            month_start=month_start,
            month_label=format_month_label(month_start),
            income_total=Decimal("0"),
            expense_total=amount,
        )
        for month_start, amount in sorted(totals.items())
    ]


def compute_sub_category_breakdown(
    records: Iterable[TransactionRecord],
) -> list[SubCategoryBreakdown]:
    """Group categorised expenses by category, then by sub-category.

    Returns:
        list[SubCategoryBreakdown]: Categories descending by total, each
        with its sub-categories descending by amount.
    """
    nested: dict[str, dict[str, list[Decimal]]] = {}
    for record in records:
        if not is_categorised_expense(record):
            continue
        sub_category = record.sub_category or ""
        if not sub_category.strip():
            continue
        by_sub = nested.setdefault(record.category, {})
        by_sub.setdefault(sub_category, []).append(
            coerce_decimal(record.amount)
        )

    breakdowns = []
    for category, by_sub in nested.items():
        sub_categories = sorted(
            (
                SubCategoryAggregate(
                    sub_category=sub_category,
                    amount=sum(amounts, start=Decimal("0")),
                    count=len(amounts),
                )
                for sub_category, amounts in by_sub.items()
            ),
            key=lambda item: item.amount,
            reverse=True,
        )
        breakdowns.append(
            SubCategoryBreakdown(
                category=category,
                sub_categories=sub_categories,
            )
        )
    return sorted(breakdowns, key=lambda item: item.total, reverse=True)


def compute_transaction_summary(
    records: Iterable[TransactionRecord],
) -> TransactionSummary:
    """Return income, expense and count totals for the records."""
    income_total = Decimal("0")
    expense_total = Decimal("0")
    count = 0
    for record in records:
        count += 1
        amount = coerce_decimal(record.amount)
        if record.kind == INCOME:
            income_total += amount
        elif record.kind == EXPENSE:
            expense_total += amount
    return TransactionSummary(
        income_total=income_total,
        expense_total=expense_total,
        transaction_count=count,
    )


def subtract_months(reference: date, months: int) -> date:
    """Return the same day ``months`` earlier, clamped to month length."""
    month_index = reference.year * 12 + reference.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(reference.day, _days_in_month(year, month))
    return date(year, month, day)


def _days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31
    return (date(year, month + 1, 1) - date(year, month, 1)).days


def parse_iso_date(value: str | None) -> date | None:
    """Parse the ``YYYY-MM-DD`` prefix of a stored date, or return None."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def format_month_label(month_start: date) -> str:
    """Return a short month label such as ``"Jan 2024"``."""
    return f"{_MONTH_ABBREVIATIONS[month_start.month - 1]} {month_start.year}"


__all__ = [
    "is_chartable_expense",
    "is_categorised_expense",
    "compute_category_totals",
    "group_top_categories",
    "compute_monthly_totals",
    "compute_sub_category_breakdown",
    "compute_transaction_summary",
    "subtract_months",
    "parse_iso_date",
    "format_month_label",
]
