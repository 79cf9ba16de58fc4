"""Database connection management — one shared connection per provider."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any

import mysql.connector

from rfiddb.config import AppConfig, DatabaseBackend, DatabaseConfig

logger = logging.getLogger(__name__)


class ConnectionFailure(ConnectionError):
    """The driver could not establish a database session."""

    def __init__(self, message: str, *, backend: DatabaseBackend, target: str):
        super().__init__(message)
        self.backend = backend
        self.target = target


class ConnectionProvider:
    """Lazily opens a single connection and hands back the same handle.

    There is no locking around the check-and-create in ``connect()``. Two
    threads racing on the first call may both open a connection; the last
    one stored wins.
    """

    def __init__(self, config: AppConfig):
        self.config = config.database
        self._conn: Any | None = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def describe(self) -> str:
        """Human-readable connection target, without the password."""
        if self.config.backend == DatabaseBackend.SQLITE:
            return f"sqlite:///{self.config.sqlite_path}"
        return (
            f"mysql://{self.config.username}@{self.config.host}:"
            f"{self.config.port}/{self.config.name}"
        )

    def connect(self) -> Any:
        """Return the held connection, opening it on first use.

        Raises:
            ConnectionFailure: If the driver cannot open a session.
        """
        if self._conn is not None:
            logger.debug("Reusing connection to %s", self.describe())
            return self._conn

        try:
            conn = _open(self.config)
        except (mysql.connector.Error, sqlite3.Error, OSError) as e:
            logger.error("Failed to connect to %s: %s", self.describe(), e)
            raise ConnectionFailure(
                str(e), backend=self.config.backend, target=self.describe()
            ) from e

        self._conn = conn
        logger.info("Opened connection to %s", self.describe())
        return conn

    def disconnect(self) -> None:
        """Forget the held connection.

        References already returned by ``connect()`` are left untouched.
        """
        if self._conn is None:
            return
        self._conn = None
        logger.info("Released connection to %s", self.describe())


def _open(config: DatabaseConfig) -> Any:
    if config.backend == DatabaseBackend.SQLITE:
        return _open_sqlite(config)
    return _open_mysql(config)


def _open_mysql(config: DatabaseConfig) -> Any:
    return mysql.connector.connect(
        host=config.host,
        port=config.port,
        database=config.name,
        user=config.username,
        password=config.password,
        connection_timeout=config.connect_timeout,
    )


def _open_sqlite(config: DatabaseConfig) -> sqlite3.Connection:
    db_path = Path(config.sqlite_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


# Module-level singleton
_provider: ConnectionProvider | None = None


def get_provider() -> ConnectionProvider:
    """Get the global provider, creating it from the default config if needed."""
    global _provider
    if _provider is None:
        _provider = ConnectionProvider(AppConfig.from_yaml())
    return _provider


def init_provider(config: AppConfig) -> ConnectionProvider:
    """Initialize the global provider."""
    global _provider
    _provider = ConnectionProvider(config)
    return _provider


def reset_provider() -> None:
    """Drop the global provider."""
    global _provider
    _provider = None


class Database:
    """Static access to the global connection. Not instantiable."""

    def __init__(self) -> None:
        raise TypeError("Database is a static namespace; construction is not allowed")

    @staticmethod
    def connect() -> Any:
        return get_provider().connect()

    @staticmethod
    def disconnect() -> None:
        get_provider().disconnect()
