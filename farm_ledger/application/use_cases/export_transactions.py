"""Use case to export transactions as CSV, xlsx or JSON files."""

from dataclasses import dataclass
from datetime import date

from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.domain.models import TransactionFilters
from farm_ledger.domain.services.filters import apply_filters
from farm_ledger.domain.services.validation import filter_valid_records
from farm_ledger.infrastructure.exporters import (
    EXPORT_MEDIA_TYPES,
    build_export_filename,
    export_csv,
    export_json,
    export_xlsx,
)
from farm_ledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


@dataclass(frozen=True)
class ExportFile:
    """Generated export ready for download.

    Attributes:
        filename: ``{dataset}_{YYYY-MM-DD}.{ext}``.
        content: Encoded file content.
        media_type: MIME type of the content.
        record_count: Number of exported transactions.
    """

    filename: str
    content: bytes
    media_type: str
    record_count: int


class ExportTransactionsUseCase:
    """Export validated, filtered transactions in the canonical columns."""

    def __init__(
        self,
        repository: TransactionsRepositoryPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        file_format: str = "csv",
        filters: TransactionFilters | None = None,
        dataset: str = "expenses",
        today: date | None = None,
    ) -> ExportFile:
        """Build an export file.

        Args:
            file_format: ``"csv"``, ``"xlsx"`` or ``"json"``.
            filters: Optional filters shared with the table.
            dataset: Dataset name used in the filename.
            today: Date used in the filename.

        Returns:
            ExportFile: Filename, content and media type.

        Raises:
            ValueError: If the format is not supported.
        """
        if file_format not in EXPORT_MEDIA_TYPES:
            raise ValueError(
                f"Unsupported export format: {file_format}. "
                "Expected csv, xlsx or json."
            )
        valid = filter_valid_records(self._repository.fetch_transactions())
        records = apply_filters(valid, filters)

        if file_format == "csv":
            content = export_csv(records).encode("utf-8")
        elif file_format == "xlsx":
            content = export_xlsx(records)
        else:
            content = export_json(records).encode("utf-8")

        filename = build_export_filename(dataset, file_format, today=today)
        self._usage_logger.info(
            f"Exported {len(records)} transactions to {filename}"
        )
        return ExportFile(
            filename=filename,
            content=content,
            media_type=EXPORT_MEDIA_TYPES[file_format],
            record_count=len(records),
        )


__all__ = ["ExportTransactionsUseCase", "ExportFile"]
