"""In-memory record source used for demos and local development."""

from dataclasses import replace
from decimal import Decimal

from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.domain.errors import RecordNotFoundError
from farm_ledger.domain.models import TransactionRecord


DEMO_TRANSACTIONS = (
    TransactionRecord(
        id="1",
        date="2024-01-15",
        kind="Income",
        description="Goat Sale - Premium Boer",
        amount=Decimal("15000"),
        payer="Farm Owner",
        category="Livestock Sales",
        sub_category="Goats",
        source="Cash",
    ),
    TransactionRecord(
        id="2",
        date="2024-01-10",
        kind="Expense",
        description="Veterinary Checkup",
        amount=Decimal("2500"),
        payer="Farm Owner",
        category="Healthcare",
        sub_category="Veterinary",
        source="UPI",
    ),
    TransactionRecord(
        id="3",
        date="2024-01-08",
        kind="Income",
        description="Sheep Wool Sale",
        amount=Decimal("8000"),
        payer="Farm Owner",
        category="Livestock Products",
        sub_category="Wool",
        source="Bank Transfer",
    ),
    TransactionRecord(
        id="4",
        date="2024-01-05",
        kind="Expense",
        description="Green fodder, 20 bundles",
        amount=Decimal("1800"),
        payer="Farm Manager",
        category="Feed",
        sub_category="Fodder",
        source="Cash",
    ),
    TransactionRecord(
        id="5",
        date="2023-12-28",
        kind="Expense",
        description="PPR vaccine doses",
        amount=Decimal("1200"),
        payer="Farm Manager",
        category="Healthcare",
        sub_category="Vaccination",
        source="Cash",
        notes="Annual round for the breeding herd",
    ),
)


class InMemoryTransactionsRepository(TransactionsRepositoryPort):
    """Record source keeping transactions in a process-local list."""

    def __init__(
        self,
        records: list[TransactionRecord] | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            records: Initial records; defaults to the demo transactions.
        """
        self._records = list(DEMO_TRANSACTIONS if records is None else records)

    def fetch_transactions(self) -> list[TransactionRecord]:
        return list(self._records)

    def create_transaction(
        self,
        record: TransactionRecord,
    ) -> TransactionRecord:
        created = record if record.id else replace(record, id=self._next_id())
        self._records.insert(0, created)
        return created

    def update_transaction(
        self,
        record: TransactionRecord,
    ) -> TransactionRecord:
        index = self._index_of(record.id)
        self._records[index] = record
        return record

    def delete_transaction(self, transaction_id: str) -> None:
        del self._records[self._index_of(transaction_id)]

    def import_transactions(self, records: list[TransactionRecord]) -> int:
        self._records.extend(records)
        return len(records)

    def bulk_delete_transactions(self, transaction_ids: list[str]) -> int:
        targets = set(transaction_ids)
        kept = [record for record in self._records if record.id not in targets]
        deleted = len(self._records) - len(kept)
        self._records = kept
        return deleted

    def _index_of(self, transaction_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == transaction_id:
                return index
        raise RecordNotFoundError(
            f"No transaction with id {transaction_id}"
        )

    def _next_id(self) -> str:
        numeric_ids = [
            int(record.id)
            for record in self._records
            if isinstance(record.id, str) and record.id.isdigit()
        ]
        return str(max(numeric_ids, default=0) + 1)


__all__ = ["InMemoryTransactionsRepository", "DEMO_TRANSACTIONS"]
