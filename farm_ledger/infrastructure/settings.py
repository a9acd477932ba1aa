"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from farm_ledger.domain.constants import DEFAULT_PAGE_SIZE
from farm_ledger.infrastructure.logging.logger import get_app_logger


DEMO_BACKEND = "demo"
SQLALCHEMY_BACKEND = "sqlalchemy"


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for selecting the transaction record source.

    Attributes:
        backend: Record source identifier (demo or sqlalchemy).
        db_url: SQLAlchemy URL for the sqlalchemy backend.
        default_page_size: Initial rows per page in the table view.
    """

    backend: str = DEMO_BACKEND
    db_url: str | None = None
    default_page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("FARM_LEDGER_BACKEND", DEMO_BACKEND).strip().lower()
        db_url = os.getenv("FARM_LEDGER_DB_URL") or None
        page_size = cls._parse_page_size(
            os.getenv("FARM_LEDGER_PAGE_SIZE"),
            logger=get_app_logger(),
        )
        return cls(
            backend=backend or DEMO_BACKEND,
            db_url=db_url,
            default_page_size=page_size,
        )

    @staticmethod
    def _parse_page_size(raw_value: str | None, logger) -> int:
        """Parse the configured page size, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Positive page size.
        """
        if not raw_value:
            return DEFAULT_PAGE_SIZE
        try:
            page_size = int(raw_value)
        except ValueError:
            page_size = 0
        if page_size <= 0:
            logger.warning(
                f"Invalid FARM_LEDGER_PAGE_SIZE '{raw_value}'; "
                f"using {DEFAULT_PAGE_SIZE}"
            )
            return DEFAULT_PAGE_SIZE
        return page_size


__all__ = ["LedgerSettings", "DEMO_BACKEND", "SQLALCHEMY_BACKEND"]
