"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from adapters import InMemoryWorkbook, SqlWorkbook
from app.config import Environment, Settings, StoreBackend
from core.dependencies import build_workbook


def test_settings_defaults(monkeypatch):
    """
    Test defaults when no environment variables are set.
    """
    monkeypatch.delenv("STORE_BACKEND", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    config = Settings(_env_file=None)

    assert config.app_name == "BarBook"
    assert config.store_backend == StoreBackend.SQL
    assert config.is_development() is True


def test_settings_from_environment(monkeypatch):
    """
    Test environment overrides.

    Verifies:
    - Enum values are accepted in any letter case
    - Plain values are read as-is
    """
    monkeypatch.setenv("ENVIRONMENT", "Testing")
    monkeypatch.setenv("STORE_BACKEND", "MEMORY")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Settings(_env_file=None)

    assert config.environment == Environment.TESTING
    assert config.is_testing() is True
    assert config.store_backend == StoreBackend.MEMORY
    assert config.log_level == "DEBUG"


def test_settings_reject_unknown_backend(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "excel")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_build_workbook_follows_backend(tmp_path):
    """
    Test build_workbook() for each backend.
    """
    memory = build_workbook(Settings(_env_file=None, store_backend="memory"))
    assert isinstance(memory, InMemoryWorkbook)

    sql = build_workbook(
        Settings(_env_file=None, store_backend="sql", store_db_url=f"sqlite:///{tmp_path / 'cfg.db'}")
    )
    try:
        assert isinstance(sql, SqlWorkbook)
    finally:
        sql.dispose()
