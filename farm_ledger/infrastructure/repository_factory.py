"""Factory helpers to select the transactions record source."""

from farm_ledger.application.ports.database import DatabaseEnginePort
from farm_ledger.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from farm_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from farm_ledger.infrastructure.demo_repository import (
    InMemoryTransactionsRepository,
)
from farm_ledger.infrastructure.logging.logger import get_app_logger
from farm_ledger.infrastructure.settings import (
    DEMO_BACKEND,
    SQLALCHEMY_BACKEND,
    LedgerSettings,
)
from farm_ledger.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def create_transactions_repository(
    settings: LedgerSettings,
    db_port: DatabaseEnginePort | None = None,
    logger=None,
) -> TransactionsRepositoryPort:
    """Return a transactions repository based on configuration.

    Args:
        settings: Ledger settings carrying the selected backend.
        db_port: Optional engine port for the sqlalchemy backend.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        TransactionsRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the sqlalchemy backend has no database URL.
        ValueError: If the backend is unknown.
    """
    resolved_logger = logger or get_app_logger()
    selected_backend = (settings.backend or DEMO_BACKEND).strip().lower()

    if selected_backend == DEMO_BACKEND:
        resolved_logger.info("Using the in-memory demo transactions")
        return InMemoryTransactionsRepository()

    if selected_backend == SQLALCHEMY_BACKEND:
        if db_port is None:
            if not settings.db_url:
                raise RuntimeError(
                    "SQLAlchemy backend requires a FARM_LEDGER_DB_URL value."
                )
            db_port = SqlAlchemyDatabaseEngineAdapter(settings.db_url)
        repository = SqlAlchemyTransactionsRepository(db_port)
        repository.prepare()
        resolved_logger.info("Using the SQLAlchemy transactions table")
        return repository

    raise ValueError(
        "Unsupported ledger backend: "
        f"{selected_backend}. Expected demo or sqlalchemy."
    )


__all__ = ["create_transactions_repository"]
