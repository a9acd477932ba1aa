"""Tests for the record validator."""

from decimal import Decimal
from types import SimpleNamespace

from farm_ledger.domain.services.validation import (
    filter_valid_records,
    is_valid_record,
)


def test_filter_keeps_order_and_drops_malformed(record_factory):
    """Valid records keep their relative order; malformed ones vanish."""
    first = record_factory("a")
    blank_id = record_factory("")
    missing_amount = record_factory("b", amount=None)
    nan_amount = record_factory("c", amount=Decimal("NaN"))
    infinite = record_factory("d", amount=float("inf"))
    last = record_factory("e", amount=0)
    raw = [first, blank_id, missing_amount, nan_amount, infinite, last]

    valid = filter_valid_records(raw)

    assert valid == [first, last]
    assert len(raw) - len(valid) == 4


def test_duplicate_ids_pass_through(record_factory):
    """Uniqueness is not checked by the validator."""
    records = [record_factory("1"), record_factory("1", amount=5)]

    assert filter_valid_records(records) == records


def test_is_valid_record_rejects_non_records():
    """Objects without the expected attributes are invalid."""
    assert is_valid_record(None) is False
    assert is_valid_record(SimpleNamespace(id=7, amount=1)) is False
    assert is_valid_record(SimpleNamespace(id="7", amount="12")) is False
    assert is_valid_record(SimpleNamespace(id="7", amount=True)) is False
    assert is_valid_record(SimpleNamespace(id="7", amount=12.5)) is True


def test_negative_amounts_are_not_rejected(record_factory):
    """Sign checks are outside the validator contract."""
    record = record_factory("n", amount=Decimal("-5"))

    assert filter_valid_records([record]) == [record]


def test_nan_record_stays_in_raw_collection(record_factory):
    """Filtering returns a new list and leaves the input untouched."""
    nan_record = record_factory("nan", amount=float("nan"))
    raw = [record_factory("ok"), nan_record]

    filter_valid_records(raw)

    assert nan_record in raw
