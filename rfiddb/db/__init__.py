"""Database layer — one shared MySQL (or SQLite) connection."""

from rfiddb.db.connection import (
    ConnectionFailure,
    ConnectionProvider,
    Database,
    get_provider,
    init_provider,
    reset_provider,
)

__all__ = [
    "ConnectionFailure",
    "ConnectionProvider",
    "Database",
    "get_provider",
    "init_provider",
    "reset_provider",
]
