"""Tests for Streamlit Altair dependency checks."""

import sys
import types

from farm_ledger.adapters.interface.streamlit import app


def test_check_altair_dependencies_ok(monkeypatch) -> None:
    monkeypatch.setitem(
        sys.modules, "numpy", types.SimpleNamespace(ndarray=object)
    )
    monkeypatch.setitem(
        sys.modules, "pandas", types.SimpleNamespace(Timestamp=object)
    )

    ok, message = app._check_altair_dependencies()

    assert ok is True
    assert message is None


def test_check_altair_dependencies_incomplete_numpy(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "numpy", types.SimpleNamespace())
    monkeypatch.setitem(
        sys.modules, "pandas", types.SimpleNamespace(Timestamp=object)
    )

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert "numpy" in message


def test_check_altair_dependencies_incomplete_pandas(monkeypatch) -> None:
    monkeypatch.setitem(
        sys.modules, "numpy", types.SimpleNamespace(ndarray=object)
    )
    monkeypatch.setitem(sys.modules, "pandas", types.SimpleNamespace())

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert "pandas" in message
