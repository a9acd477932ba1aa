"""Composition root for wiring infrastructure adapters."""

from farm_ledger.application.ports.database import DatabaseEnginePort
from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from farm_ledger.infrastructure.logging.logger import get_app_logger
from farm_ledger.infrastructure.repository_factory import (
    create_transactions_repository,
)
from farm_ledger.infrastructure.settings import (
    SQLALCHEMY_BACKEND,
    LedgerSettings,
)


def build_database_adapter(
    settings: LedgerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or LedgerSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_transactions_repository(
    settings: LedgerSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the configured transactions repository."""
    resolved = settings or LedgerSettings.from_env()
    if (
        db_port is None
        and resolved.backend == SQLALCHEMY_BACKEND
        and resolved.db_url
    ):
        db_port = build_database_adapter(resolved)
    return create_transactions_repository(
        resolved,
        db_port=db_port,
        logger=get_app_logger(),
    )


__all__ = ["build_database_adapter", "build_transactions_repository"]
