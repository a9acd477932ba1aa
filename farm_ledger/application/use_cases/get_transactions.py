"""Use case to build the transactions table view."""

from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.domain.constants import DEFAULT_PAGE_SIZE, DESCENDING
from farm_ledger.domain.models import TransactionFilters, TransactionsView
from farm_ledger.domain.services.aggregation import (
    compute_transaction_summary,
)
from farm_ledger.domain.services.filters import apply_filters
from farm_ledger.domain.services.pagination import paginate
from farm_ledger.domain.services.sorting import sort_records
from farm_ledger.domain.services.validation import filter_valid_records
from farm_ledger.infrastructure.logging.logger import get_app_logger


class GetTransactionsUseCase:
    """Validate, filter, sort and paginate the stored transactions."""

    def __init__(
        self,
        repository: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing the raw transaction snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: TransactionFilters | None = None,
        sort_field: str = "date",
        direction: str = DESCENDING,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = 1,
    ) -> TransactionsView:
        """Return one page of transactions and the filtered totals.

        Args:
            filters: Optional user filters.
            sort_field: Field to order the table by.
            direction: ``"asc"`` or ``"desc"``.
            page_size: Rows per page.
            page: Requested page, clamped to the available pages.

        Returns:
            TransactionsView: Page, summary and validation counts.
        """
        raw = self._repository.fetch_transactions()
        valid = filter_valid_records(raw)
        dropped = len(raw) - len(valid)
        if dropped:
            self._logger.warning(
                f"Excluded {dropped} malformed transactions from the view"
            )

        filtered = apply_filters(valid, filters)
        ordered = sort_records(filtered, sort_field, direction)
        current_page = paginate(ordered, page_size, page)
        self._logger.info(
            f"Transactions page {current_page.page}/"
            f"{current_page.total_pages} built from {len(filtered)} records"
        )
        return TransactionsView(
            page=current_page,
            summary=compute_transaction_summary(filtered),
            raw_count=len(raw),
            valid_count=len(valid),
        )


__all__ = ["GetTransactionsUseCase", "TransactionsView"]
