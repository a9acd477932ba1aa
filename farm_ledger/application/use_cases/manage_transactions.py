"""Use case for adding, editing and deleting single transactions."""

from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.domain.errors import InvalidTransactionError
from farm_ledger.domain.models import TransactionRecord
from farm_ledger.infrastructure.logging.logger import get_usage_logger


class ManageTransactionsUseCase:
    """Forward id-addressed writes to the record source.

    Writes replace or remove whole records by id; nothing is edited in
    place.
    """

    def __init__(
        self,
        repository: TransactionsRepositoryPort,
        usage_logger=None,
    ) -> None:
        self._repository = repository
        self._usage_logger = usage_logger or get_usage_logger()

    def add(self, record: TransactionRecord) -> TransactionRecord:
        """Store a new transaction; the source assigns a blank id."""
        created = self._repository.create_transaction(record)
        self._usage_logger.info(f"Added transaction {created.id}")
        return created

    def update(self, record: TransactionRecord) -> TransactionRecord:
        """Replace the stored transaction that shares the record's id.

        Raises:
            InvalidTransactionError: If the record has no id.
        """
        _require_id(record.id, "update")
        updated = self._repository.update_transaction(record)
        self._usage_logger.info(f"Updated transaction {updated.id}")
        return updated

    def delete(self, transaction_id: str) -> None:
        """Remove one transaction.

        Raises:
            InvalidTransactionError: If the id is blank.
        """
        _require_id(transaction_id, "deletion")
        self._repository.delete_transaction(transaction_id)
        self._usage_logger.info(f"Deleted transaction {transaction_id}")

    def bulk_delete(self, transaction_ids: list[str]) -> int:
        """Remove several transactions, skipping blank ids."""
        ids = [tid for tid in transaction_ids if tid and tid.strip()]
        if not ids:
            return 0
        deleted = self._repository.bulk_delete_transactions(ids)
        self._usage_logger.info(f"Deleted {deleted} transactions in bulk")
        return deleted


def _require_id(transaction_id: str | None, action: str) -> None:
    if not transaction_id or not transaction_id.strip():
        raise InvalidTransactionError(
            f"Invalid transaction ID for {action}"
        )


__all__ = ["ManageTransactionsUseCase"]
