"""SQLAlchemy-backed record source for transactions."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from farm_ledger.application.ports.database import DatabaseEnginePort
from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.domain.errors import RecordNotFoundError, RecordSourceError
from farm_ledger.domain.models import TransactionRecord
from farm_ledger.utils.decimal_utils import coerce_decimal


CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    transaction_date TEXT NOT NULL,
    kind TEXT NOT NULL,
    description TEXT,
    amount NUMERIC(14, 2),
    payer TEXT,
    category TEXT,
    sub_category TEXT,
    source TEXT,
    notes TEXT
)
"""

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, transaction_date, kind, description, amount, payer,
           category, sub_category, source, notes
    FROM transactions
    ORDER BY transaction_date DESC, id
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        id,
        transaction_date,
        kind,
        description,
        amount,
        payer,
        category,
        sub_category,
        source,
        notes
    )
    VALUES (
        :id,
        :transaction_date,
        :kind,
        :description,
        :amount,
        :payer,
        :category,
        :sub_category,
        :source,
        :notes
    )
    """
)

UPDATE_TRANSACTION_SQL = text(
    """
    UPDATE transactions
    SET transaction_date = :transaction_date,
        kind = :kind,
        description = :description,
        amount = :amount,
        payer = :payer,
        category = :category,
        sub_category = :sub_category,
        source = :source,
        notes = :notes
    WHERE id = :id
    """
)

DELETE_TRANSACTION_SQL = text("DELETE FROM transactions WHERE id = :id")

BULK_DELETE_TRANSACTIONS_SQL = text(
    "DELETE FROM transactions WHERE id IN :ids"
).bindparams(bindparam("ids", expanding=True))


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Record source backed by a ``transactions`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def prepare(self) -> None:
        """Ensure the transactions table exists."""
        with self._translate_errors():
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_TRANSACTIONS_SQL)

    def fetch_transactions(self) -> list[TransactionRecord]:
        """Return every stored transaction, newest first."""
        with self._translate_errors():
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                rows = conn.execute(SELECT_TRANSACTIONS_SQL).all()
        return [
            TransactionRecord(
                id=row.id,
                date=row.transaction_date,
                kind=row.kind,
                description=row.description or "",
                amount=(
                    coerce_decimal(row.amount)
                    if row.amount is not None
                    else None
                ),
                payer=row.payer or "",
                category=row.category or "",
                sub_category=row.sub_category or "",
                source=row.source or "",
                notes=row.notes or "",
            )
            for row in rows
        ]

    def create_transaction(
        self,
        record: TransactionRecord,
    ) -> TransactionRecord:
        """Insert a transaction, generating an id when it has none."""
        created = record if record.id else replace(record, id=uuid4().hex)
        with self._translate_errors():
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.execute(INSERT_TRANSACTION_SQL, _as_row(created))
        return created

    def update_transaction(
        self,
        record: TransactionRecord,
    ) -> TransactionRecord:
        """Overwrite the stored transaction sharing ``record.id``.

        Raises:
            RecordNotFoundError: If no row has that id.
        """
        with self._translate_errors():
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                result = conn.execute(UPDATE_TRANSACTION_SQL, _as_row(record))
        if result.rowcount == 0:
            raise RecordNotFoundError(f"Transaction {record.id} not found")
        return record

    def delete_transaction(self, transaction_id: str) -> None:
        """Remove one transaction.

        Raises:
            RecordNotFoundError: If no row has that id.
        """
        with self._translate_errors():
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                result = conn.execute(
                    DELETE_TRANSACTION_SQL, {"id": transaction_id}
                )
        if result.rowcount == 0:
            raise RecordNotFoundError(f"Transaction {transaction_id} not found")

    def import_transactions(self, records: list[TransactionRecord]) -> int:
        """Insert a batch in a single transaction; nothing is kept on failure."""
        if not records:
            return 0
        with self._translate_errors():
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.execute(
                    INSERT_TRANSACTION_SQL,
                    [_as_row(record) for record in records],
                )
        return len(records)

    def bulk_delete_transactions(self, transaction_ids: list[str]) -> int:
        """Delete every listed transaction and return how many went."""
        if not transaction_ids:
            return 0
        with self._translate_errors():
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                result = conn.execute(
                    BULK_DELETE_TRANSACTIONS_SQL,
                    {"ids": list(transaction_ids)},
                )
        return result.rowcount

    @staticmethod
    @contextmanager
    def _translate_errors() -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            raise RecordSourceError(f"Record source failure: {exc}") from exc


def _as_row(record: TransactionRecord) -> dict[str, object]:
    # NUMERIC is bound as text so sqlite and postgres both accept it.
    amount = record.amount
    if isinstance(amount, Decimal):
        amount = str(amount)
    elif amount is not None:
        amount = str(coerce_decimal(amount))
    return {
        "id": record.id,
        "transaction_date": record.date,
        "kind": record.kind,
        "description": record.description,
        "amount": amount,
        "payer": record.payer,
        "category": record.category,
        "sub_category": record.sub_category,
        "source": record.source,
        "notes": record.notes,
    }


__all__ = ["SqlAlchemyTransactionsRepository", "CREATE_TRANSACTIONS_SQL"]
