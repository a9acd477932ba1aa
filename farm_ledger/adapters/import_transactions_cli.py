"""CLI adapter to import a CSV or Excel file into the ledger.

This module wires the ImportTransactionsUseCase to the configured record
source and provides a command-line entry point for bulk imports.
"""

import argparse
from pathlib import Path

from farm_ledger.application.use_cases.import_transactions import (
    ImportTransactionsUseCase,
)
from farm_ledger.domain.errors import LedgerError
from farm_ledger.infrastructure.container import build_transactions_repository
from farm_ledger.infrastructure.logging.logger import get_app_logger


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Import farm transactions from a CSV or Excel file.",
    )
    parser.add_argument("path", type=Path, help="File to import")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the import use case and return a process exit code."""
    args = _parse_args(argv)
    logger = get_app_logger()
    repository = build_transactions_repository()
    use_case = ImportTransactionsUseCase(repository, logger=logger)

    try:
        content = args.path.read_bytes()
        result = use_case.execute(args.path.name, content)
    except (OSError, LedgerError) as exc:
        logger.error(f"Import of {args.path} failed: {exc}")
        print(f"Import failed: {exc}")
        return 1

    print(
        f"Imported {result.imported_count} transactions "
        f"from {result.filename}."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
