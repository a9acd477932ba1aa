"""Domain errors raised by the transaction pipeline and its adapters."""


class LedgerError(Exception):
    """Base class for errors surfaced to farm ledger users."""


class ImportFailedError(LedgerError):
    """Raised when an import yields no transactions or cannot be read."""


class UnsupportedFileTypeError(ImportFailedError):
    """Raised when an import file extension has no reader."""


class InvalidTransactionError(LedgerError):
    """Raised when a write targets a transaction without a usable id."""


class RecordNotFoundError(LedgerError):
    """Raised when a record source has no transaction with the given id."""


class RecordSourceError(LedgerError):
    """Raised when the record source cannot be read or written."""


__all__ = [
    "LedgerError",
    "ImportFailedError",
    "UnsupportedFileTypeError",
    "InvalidTransactionError",
    "RecordNotFoundError",
    "RecordSourceError",
]
