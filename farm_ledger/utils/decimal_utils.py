"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, a spreadsheet cell or a payload.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def is_real_number(value) -> bool:
    """Return True for int, float and Decimal values (bool excluded)."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def is_finite_amount(value) -> bool:
    """Return True when the value is a finite real number.

    Args:
        value: Candidate amount.

    Returns:
        bool: False for None, NaN, infinities and non-numeric values.
    """
    if not is_real_number(value):
        return False
    try:
        return coerce_decimal(value).is_finite()
    except InvalidOperation:
        return False


__all__ = ["coerce_decimal", "is_real_number", "is_finite_amount"]
