"""CLI adapter to export ledger transactions to a file."""

import argparse
from pathlib import Path

from farm_ledger.application.use_cases.export_transactions import (
    ExportTransactionsUseCase,
)
from farm_ledger.domain.models import TransactionFilters
from farm_ledger.infrastructure.container import build_transactions_repository
from farm_ledger.infrastructure.exporters import EXPORT_MEDIA_TYPES
from farm_ledger.infrastructure.logging.logger import get_app_logger


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export farm transactions as CSV, xlsx or JSON.",
    )
    parser.add_argument(
        "--format",
        dest="file_format",
        choices=sorted(EXPORT_MEDIA_TYPES),
        default="csv",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory receiving the export file",
    )
    parser.add_argument("--kind", help="Only Income or Expense records")
    parser.add_argument("--category", help="Only this category")
    parser.add_argument("--date-from", help="Earliest date, YYYY-MM-DD")
    parser.add_argument("--date-to", help="Latest date, YYYY-MM-DD")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the export use case and write the file."""
    args = _parse_args(argv)
    logger = get_app_logger()
    repository = build_transactions_repository()
    use_case = ExportTransactionsUseCase(repository, logger=logger)
    filters = TransactionFilters(
        kind=args.kind,
        category=args.category,
        date_from=args.date_from,
        date_to=args.date_to,
    )

    export = use_case.execute(file_format=args.file_format, filters=filters)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    target = args.output_dir / export.filename
    target.write_bytes(export.content)

    print(f"Exported {export.record_count} transactions to {target}.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
