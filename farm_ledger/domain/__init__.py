"""Domain package for transaction rules and core models."""

from .constants import EXPENSE, INCOME, PAGE_SIZE_OPTIONS
from .errors import (
    ImportFailedError,
    InvalidTransactionError,
    LedgerError,
    RecordNotFoundError,
    RecordSourceError,
    UnsupportedFileTypeError,
)
from .models import (
    CategoryAggregate,
    MonthlyAggregate,
    Page,
    SubCategoryBreakdown,
    TransactionFilters,
    TransactionRecord,
    TransactionSummary,
)

__all__ = [
    "EXPENSE",
    "INCOME",
    "PAGE_SIZE_OPTIONS",
    "ImportFailedError",
    "InvalidTransactionError",
    "LedgerError",
    "RecordNotFoundError",
    "RecordSourceError",
    "UnsupportedFileTypeError",
    "CategoryAggregate",
    "MonthlyAggregate",
    "Page",
    "SubCategoryBreakdown",
    "TransactionFilters",
    "TransactionRecord",
    "TransactionSummary",
]
