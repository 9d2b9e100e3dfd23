from __future__ import annotations

import dataclasses
import logging

import pytest

from leadbook.core import startup
from leadbook.core.config import get_config


def _config(**overrides):
    return dataclasses.replace(get_config(), **overrides)


@pytest.fixture
def reachable_database(monkeypatch):
    monkeypatch.setattr(startup, "get_config", lambda: _config(DB_CONNECTIVITY_REQUIRED=False))
    monkeypatch.setattr(startup, "verify_database_connection", lambda: True)
    monkeypatch.setattr(startup, "get_active_database_url", lambda: "sqlite:///./leadbook.db")


def test_required_database_failure_aborts_startup(monkeypatch):
    monkeypatch.setattr(startup, "get_config", lambda: _config(DB_CONNECTIVITY_REQUIRED=True))
    monkeypatch.setattr(startup, "verify_database_connection", lambda: False)

    with pytest.raises(RuntimeError):
        startup.validate_startup_config()


def test_optional_database_failure_only_warns(monkeypatch, caplog):
    monkeypatch.setattr(startup, "get_config", lambda: _config(DB_CONNECTIVITY_REQUIRED=False))
    monkeypatch.setattr(startup, "verify_database_connection", lambda: False)

    with caplog.at_level(logging.INFO, logger="leadbook.core.startup"):
        report = startup.validate_startup_config()

    messages = [record.getMessage() for record in caplog.records]
    assert "startup.database.connectivity_optional_failed" in messages
    assert "startup.config.validated" in messages
    assert report.database_ok is False
    assert report.schema_ready is False


def test_ready_schema_reports_scheme(reachable_database, monkeypatch, caplog):
    monkeypatch.setattr(startup, "missing_tables", lambda: [])

    with caplog.at_level(logging.INFO, logger="leadbook.core.startup"):
        report = startup.validate_startup_config()

    record = next(r for r in caplog.records if r.getMessage() == "startup.config.validated")
    assert record.database_url_scheme == "sqlite"
    assert report.schema_ready is True


def test_missing_tables_are_reported(reachable_database, monkeypatch, caplog):
    monkeypatch.setattr(startup, "missing_tables", lambda: ["leads", "lead_products"])

    with caplog.at_level(logging.WARNING, logger="leadbook.core.startup"):
        report = startup.validate_startup_config()

    assert report.missing_tables == ["leads", "lead_products"]
    assert report.schema_ready is False
    assert "startup.database.schema_missing" in [record.getMessage() for record in caplog.records]
