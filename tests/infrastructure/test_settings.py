"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from farm_ledger.infrastructure import settings as settings_module
from farm_ledger.infrastructure.settings import LedgerSettings


def _isolate(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in (
        "FARM_LEDGER_BACKEND",
        "FARM_LEDGER_DB_URL",
        "FARM_LEDGER_PAGE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults_to_demo(monkeypatch):
    _isolate(monkeypatch)

    settings = LedgerSettings.from_env()

    assert settings == LedgerSettings()
    assert settings.backend == "demo"
    assert settings.db_url is None
    assert settings.default_page_size == 10


def test_from_env_reads_sqlalchemy_configuration(monkeypatch):
    _isolate(monkeypatch)
    monkeypatch.setenv("FARM_LEDGER_BACKEND", " SQLAlchemy ")
    monkeypatch.setenv("FARM_LEDGER_DB_URL", "sqlite:///ledger.db")
    monkeypatch.setenv("FARM_LEDGER_PAGE_SIZE", "20")

    settings = LedgerSettings.from_env()

    assert settings.backend == "sqlalchemy"
    assert settings.db_url == "sqlite:///ledger.db"
    assert settings.default_page_size == 20


def test_invalid_page_size_falls_back_with_warning():
    logger = MagicMock()

    assert LedgerSettings._parse_page_size("zero", logger) == 10
    assert LedgerSettings._parse_page_size("-3", logger) == 10
    assert logger.warning.call_count == 2
    assert LedgerSettings._parse_page_size(None, logger) == 10
    assert LedgerSettings._parse_page_size("50", logger) == 50
