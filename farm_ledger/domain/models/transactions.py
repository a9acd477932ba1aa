"""Domain models for farm income and expense transactions."""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from farm_ledger.utils.decimal_utils import coerce_decimal, is_real_number


@dataclass(frozen=True)
class TransactionRecord:
    """One income or expense entry.

    The record does not validate itself: raw collections may hold records
    with a blank id or a missing/NaN amount, and only the validator decides
    what reaches the views.

    Attributes:
        id: Opaque identifier, unique within a collection snapshot.
        date: ISO calendar date (``YYYY-MM-DD``).
        kind: ``"Income"`` or ``"Expense"``.
        description: Free text.
        amount: Non-negative amount.
        payer: Who paid.
        category: Top-level classification, may be empty.
        sub_category: Second-level classification, may be empty.
        source: Payment channel.
        notes: Optional free text.
    """

    id: str
    date: str
    kind: str
    description: str
    amount: Decimal | None
    payer: str = ""
    category: str = ""
    sub_category: str = ""
    source: str = ""
    notes: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TransactionRecord":
        """Build a record from an API payload or a database row mapping.

        Accepts both the API keys (``type``, ``paidBy``, ``subCategory``)
        and the canonical snake_case keys.
        """
        return cls(
            id=str(payload.get("id") or ""),
            date=str(payload.get("date") or ""),
            kind=str(payload.get("type") or payload.get("kind") or ""),
            description=str(payload.get("description") or ""),
            amount=_payload_amount(payload.get("amount")),
            payer=str(payload.get("paidBy") or payload.get("payer") or ""),
            category=str(payload.get("category") or ""),
            sub_category=str(
                payload.get("subCategory")
                or payload.get("sub_category")
                or ""
            ),
            source=str(payload.get("source") or ""),
            notes=str(payload.get("notes") or ""),
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the API payload shape for this record."""
        amount = self.amount
        if is_real_number(amount):
            amount = float(amount)
        return {
            "id": self.id,
            "date": self.date,
            "type": self.kind,
            "description": self.description,
            "amount": amount,
            "paidBy": self.payer,
            "category": self.category,
            "subCategory": self.sub_category,
            "source": self.source,
            "notes": self.notes,
        }


def _payload_amount(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    if is_real_number(value):
        return coerce_decimal(value)
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        return None


@dataclass(frozen=True)
class TransactionFilters:
    """User-selected filters for the transactions table.

    Empty values disable the corresponding filter.
    """

    search: str | None = None
    kind: str | None = None
    category: str | None = None
    payer: str | None = None
    source: str | None = None
    date_from: str | None = None
    date_to: str | None = None


@dataclass(frozen=True)
class TransactionSummary:
    """Income and expense totals over a collection."""

    income_total: Decimal
    expense_total: Decimal
    transaction_count: int

    @property
    def balance(self) -> Decimal:
        """Return income_total minus expense_total."""
        return self.income_total - self.expense_total


__all__ = ["TransactionRecord", "TransactionFilters", "TransactionSummary"]
