"""Application configuration — defaults, then config/app.yml, then env vars."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


def _repo_root() -> Path:
    """Directory holding pyproject.toml, or the working directory when installed."""
    root = Path(__file__).resolve().parents[1]
    return root if (root / "pyproject.toml").exists() else Path.cwd()


REPO_ROOT = _repo_root()


class DatabaseBackend(str, Enum):
    MYSQL = "mysql"
    SQLITE = "sqlite"


class _EnvFirstSettings(BaseSettings):
    """Settings where env vars win over values passed to the constructor."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings, dotenv_settings, file_secret_settings


class DatabaseConfig(_EnvFirstSettings):
    backend: DatabaseBackend = DatabaseBackend.MYSQL
    host: str = "localhost"
    port: int = 3306
    name: str = "rfiddatabase"
    username: str = "pradeep"
    password: str = "pradeeeep123"
    connect_timeout: int = 10
    sqlite_path: Path = REPO_ROOT / "data" / "rfiddatabase.db"

    model_config = {"env_prefix": "RFIDDB_DB_"}


class AppConfig(_EnvFirstSettings):
    """Top-level application configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)

    log_level: str = "info"

    # Environment & Sentry
    environment: str = "development"
    sentry_dsn: str = ""

    model_config = {"env_prefix": "RFIDDB_"}

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> AppConfig:
        """Load config/app.yml (or ``path``); RFIDDB_* env vars take precedence."""
        path = path or REPO_ROOT / "config" / "app.yml"

        values: dict[str, Any] = {}
        if path.exists():
            values = yaml.safe_load(path.read_text()) or {}

        # A nested dict would be validated without reading RFIDDB_DB_* env vars
        database = DatabaseConfig(**(values.pop("database", None) or {}))
        return cls(database=database, **values)
