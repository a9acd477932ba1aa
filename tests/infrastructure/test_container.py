"""Tests for the composition root."""

from farm_ledger.infrastructure import container
from farm_ledger.infrastructure.settings import LedgerSettings


def test_build_transactions_repository_passes_settings(monkeypatch):
    captured = {}

    def _fake_factory(settings, db_port=None, logger=None):
        captured["settings"] = settings
        captured["db_port"] = db_port
        captured["logger"] = logger
        return "repo"

    monkeypatch.setattr(
        container,
        "create_transactions_repository",
        _fake_factory,
    )
    monkeypatch.setattr(container, "get_app_logger", lambda: "logger")
    settings = LedgerSettings(backend="demo")

    assert container.build_transactions_repository(settings) == "repo"
    assert captured == {
        "settings": settings,
        "db_port": None,
        "logger": "logger",
    }


def test_build_transactions_repository_reads_env_by_default(monkeypatch):
    settings = LedgerSettings()
    monkeypatch.setattr(
        container.LedgerSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    monkeypatch.setattr(
        container,
        "create_transactions_repository",
        lambda resolved, db_port=None, logger=None: resolved,
    )
    monkeypatch.setattr(container, "get_app_logger", lambda: None)

    assert container.build_transactions_repository() is settings


def test_build_database_adapter_uses_settings_url():
    adapter = container.build_database_adapter(
        LedgerSettings(db_url="sqlite://")
    )

    assert adapter._db_url == "sqlite://"


def test_build_transactions_repository_wires_database_adapter(monkeypatch):
    captured = {}

    def _fake_factory(settings, db_port=None, logger=None):
        captured["db_port"] = db_port
        return "repo"

    monkeypatch.setattr(
        container,
        "create_transactions_repository",
        _fake_factory,
    )
    monkeypatch.setattr(container, "get_app_logger", lambda: None)
    settings = LedgerSettings(backend="sqlalchemy", db_url="sqlite://")

    container.build_transactions_repository(settings)

    assert isinstance(
        captured["db_port"],
        container.SqlAlchemyDatabaseEngineAdapter,
    )
    assert captured["db_port"]._db_url == "sqlite://"
