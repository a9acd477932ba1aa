"""Use case to import transactions from a CSV or spreadsheet file.

The import is all or nothing: rows are read and normalized in memory, and
only a non-empty batch is handed to the record source in a single call.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.domain.errors import ImportFailedError
from farm_ledger.domain.models import TransactionRecord
from farm_ledger.domain.services.normalization import (
    current_batch_stamp,
    normalize_rows,
)
from farm_ledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from farm_ledger.infrastructure.tabular_readers import read_tabular_file


RowReader = Callable[[str, bytes | str], list[Mapping[str, Any]]]


@dataclass(frozen=True)
class ImportResult:
    """Result of an import run.

    Attributes:
        filename: Name of the imported file.
        row_count: Rows read from the file.
        imported_count: Transactions accepted by the record source.
        records: Normalized transactions that were imported.
    """

    filename: str
    row_count: int
    imported_count: int
    records: list[TransactionRecord]


class ImportTransactionsUseCase:
    """Read, normalize and store imported transactions."""

    def __init__(
        self,
        repository: TransactionsRepositoryPort,
        logger=None,
        usage_logger=None,
        reader: RowReader = read_tabular_file,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port receiving the imported batch.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user-initiated actions.
            reader: Callable turning a filename and its content into rows.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._reader = reader

    def execute(
        self,
        filename: str,
        content: bytes | str,
        today: date | None = None,
        batch_stamp: int | None = None,
    ) -> ImportResult:
        """Import every row of the file.

        Args:
            filename: Original filename; its extension selects the reader.
            content: Raw file content.
            today: Fallback date for rows without a usable date.
            batch_stamp: Optional batch identifier used in generated ids.

        Returns:
            ImportResult: Counts and the imported records.

        Raises:
            ImportFailedError: If the file cannot be read or holds no rows.
        """
        rows = self._reader(filename, content)
        self._logger.info(f"Read {len(rows)} rows from {filename}")
        if not rows:
            raise ImportFailedError(
                f"No valid transactions found in {filename}."
            )

        stamp = self._free_batch_stamp(
            batch_stamp if batch_stamp is not None else current_batch_stamp(),
            len(rows),
        )
        records = normalize_rows(rows, batch_stamp=stamp, today=today)
        imported_count = self._repository.import_transactions(records)
        self._usage_logger.info(
            f"Imported {imported_count} transactions from {filename}"
        )
        return ImportResult(
            filename=filename,
            row_count=len(rows),
            imported_count=imported_count,
            records=records,
        )

    def _free_batch_stamp(self, stamp: int, row_count: int) -> int:
        """Return a stamp whose generated ids are not already stored."""
        existing = {
            record.id for record in self._repository.fetch_transactions()
        }
        while any(
            f"imported_{stamp}_{index}" in existing
            for index in range(row_count)
        ):
            self._logger.warning(
                f"Import batch {stamp} collides with stored ids; retrying"
            )
            stamp += 1
        return stamp


__all__ = ["ImportTransactionsUseCase", "ImportResult"]
