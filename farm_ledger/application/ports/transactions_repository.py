"""Port for the transaction record source."""

from typing import Protocol

from farm_ledger.domain.models import TransactionRecord


class TransactionsRepositoryPort(Protocol):
    """Port exposing reads and id-addressed writes of transactions.

    Implementations return raw snapshots: records are not validated here.
    """

    def fetch_transactions(self) -> list[TransactionRecord]:
        """Return every stored transaction."""

    def create_transaction(
        self,
        record: TransactionRecord,
    ) -> TransactionRecord:
        """Store a new transaction and return it with its assigned id."""

    def update_transaction(
        self,
        record: TransactionRecord,
    ) -> TransactionRecord:
        """Replace the transaction sharing the record's id."""

    def delete_transaction(self, transaction_id: str) -> None:
        """Remove the transaction with the given id."""

    def import_transactions(self, records: list[TransactionRecord]) -> int:
        """Store a batch of imported transactions, all or nothing."""

    def bulk_delete_transactions(self, transaction_ids: list[str]) -> int:
        """Remove the given transactions and return how many were removed."""


__all__ = ["TransactionsRepositoryPort"]
