"""
Test settings loading from the environment.

Every section reads its own prefix; the aggregate is cached.
"""
from __future__ import annotations

import logging

import pytest

from northwind.infrastructure.logging import get_logger
from northwind.settings import AppSettings, DatabaseSettings, LoggingSettings, get_app_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_defaults_without_environment(monkeypatch):
    """Test defaults apply when no variables are set."""
    monkeypatch.delenv("NORTHWIND_DB_URL", raising=False)
    monkeypatch.delenv("NORTHWIND_LOG_LEVEL", raising=False)

    settings = get_app_settings()

    assert isinstance(settings, AppSettings)
    assert settings.database.url.startswith("postgresql+asyncpg://")
    assert settings.database.pool_size == 10
    assert settings.database.echo_sql is False
    assert settings.logging.level == "INFO"


def test_environment_overrides(monkeypatch):
    """Test prefixed variables override defaults and are typed."""
    monkeypatch.setenv("NORTHWIND_DB_URL", "sqlite+aiosqlite:///./northwind.db")
    monkeypatch.setenv("NORTHWIND_DB_POOL_SIZE", "3")
    monkeypatch.setenv("NORTHWIND_DB_ECHO_SQL", "true")
    monkeypatch.setenv("NORTHWIND_LOG_LEVEL", "DEBUG")

    settings = get_app_settings()

    assert settings.database.url == "sqlite+aiosqlite:///./northwind.db"
    assert settings.database.pool_size == 3
    assert settings.database.echo_sql is True
    assert settings.logging.level == "DEBUG"


def test_settings_are_cached():
    """Test the aggregate is built once."""
    assert get_app_settings() is get_app_settings()


def test_sections_ignore_unrelated_variables(monkeypatch):
    """Test other prefixes do not leak into a section."""
    monkeypatch.setenv("NORTHWIND_LOG_URL", "nope")

    assert DatabaseSettings().url != "nope"
    assert not hasattr(LoggingSettings(), "url")


def test_get_logger_attaches_single_handler(monkeypatch):
    """Test repeated calls do not stack handlers."""
    monkeypatch.setenv("NORTHWIND_LOG_LEVEL", "warning")

    logger = get_logger("northwind.tests.settings")
    again = get_logger("northwind.tests.settings")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
