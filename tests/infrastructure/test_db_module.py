"""Tests for the infrastructure.db module."""

import pytest

from freightdesk.infrastructure import db as db_module


def test_get_env_var_loads_dotenv_first(monkeypatch):
    calls = []
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: calls.append(1))
    monkeypatch.setenv("FREIGHTDESK_DB_URL", "postgresql://ledger")

    assert db_module._get_env_var("FREIGHTDESK_DB_URL") == "postgresql://ledger"
    assert calls == [1]


def test_get_env_var_raises_when_missing(monkeypatch):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("FREIGHTDESK_DB_URL", raising=False)

    with pytest.raises(RuntimeError, match="FREIGHTDESK_DB_URL"):
        db_module._get_env_var("FREIGHTDESK_DB_URL")


def test_create_engine_configures_queue_pool(monkeypatch):
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://ledger")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://ledger"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_create_engine_keeps_default_pool_for_sqlite(monkeypatch):
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    db_module._create_engine("sqlite:///ledger.db")

    assert "poolclass" not in captured["kwargs"]


def test_get_ledger_engine_is_memoized(monkeypatch):
    db_module._ledger_engine = None
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FREIGHTDESK_DB_URL", "postgresql://ledger")

    engine_one = db_module.get_ledger_engine()
    engine_two = db_module.get_ledger_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://ledger"
    assert created == ["postgresql://ledger"]
    db_module._ledger_engine = None


def test_adapter_returns_ledger_engine(monkeypatch):
    monkeypatch.setattr(db_module, "get_ledger_engine", lambda: "ledger_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_ledger_engine() == "ledger_engine"
