"""Use case to compute the expense chart aggregates."""

from datetime import date

from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.domain.models import ExpenseChartsView, TransactionFilters
from farm_ledger.domain.services.aggregation import (
    compute_category_totals,
    compute_monthly_totals,
    compute_sub_category_breakdown,
    group_top_categories,
)
from farm_ledger.domain.services.filters import apply_filters
from farm_ledger.domain.services.validation import filter_valid_records
from farm_ledger.infrastructure.logging.logger import get_app_logger


class GetExpenseChartsUseCase:
    """Derive category, monthly and sub-category aggregates."""

    def __init__(
        self,
        repository: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: TransactionFilters | None = None,
        today: date | None = None,
    ) -> ExpenseChartsView:
        """Return chart aggregates for the filtered, validated records.

        Args:
            filters: Optional user filters shared with the table.
            today: Reference date for the trailing twelve months.

        Returns:
            ExpenseChartsView: Aggregates ready for presentation.
        """
        valid = filter_valid_records(self._repository.fetch_transactions())
        records = apply_filters(valid, filters)

        category_totals = compute_category_totals(records)
        view = ExpenseChartsView(
            category_totals=category_totals,
            top_categories=group_top_categories(category_totals),
            monthly=compute_monthly_totals(records, today=today),
            sub_categories=compute_sub_category_breakdown(records),
        )
        self._logger.info(
            f"Expense charts computed: categories={len(category_totals)}, "
            f"months={len(view.monthly)}"
        )
        return view


__all__ = ["GetExpenseChartsUseCase", "ExpenseChartsView"]
