"""Application use cases package."""

from .export_transactions import ExportFile, ExportTransactionsUseCase
from .get_expense_charts import ExpenseChartsView, GetExpenseChartsUseCase
from .get_transactions import GetTransactionsUseCase, TransactionsView
from .import_transactions import ImportResult, ImportTransactionsUseCase
from .manage_transactions import ManageTransactionsUseCase

__all__ = [
    "ExportFile",
    "ExportTransactionsUseCase",
    "ExpenseChartsView",
    "GetExpenseChartsUseCase",
    "GetTransactionsUseCase",
    "TransactionsView",
    "ImportResult",
    "ImportTransactionsUseCase",
    "ManageTransactionsUseCase",
]
