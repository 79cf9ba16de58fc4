"""Shared fixtures for database connection tests."""

from __future__ import annotations

import pytest

from rfiddb.config import AppConfig, DatabaseBackend, DatabaseConfig
from rfiddb.db.connection import reset_provider


@pytest.fixture(autouse=True)
def _clean_provider():
    """Each test starts without a global provider."""
    reset_provider()
    yield
    reset_provider()


@pytest.fixture
def sqlite_config(tmp_path) -> AppConfig:
    """App config pointing at a temporary SQLite file."""
    config = AppConfig()
    config.database = DatabaseConfig(
        backend=DatabaseBackend.SQLITE,
        sqlite_path=tmp_path / "data" / "test.db",
    )
    return config


@pytest.fixture
def mysql_config() -> AppConfig:
    """App config for MySQL with explicit credentials."""
    config = AppConfig()
    config.database = DatabaseConfig(
        backend=DatabaseBackend.MYSQL,
        host="db.example.com",
        port=3307,
        name="rfiddatabase",
        username="reader",
        password="s3cret",
        connect_timeout=5,
    )
    return config
