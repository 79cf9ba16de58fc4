"""rfiddb command-line entry point.

Usage:
    rfiddb info                 # Show the configured connection target
    rfiddb check                # Open the shared connection once and release it
    rfiddb --config app.yml check
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import sentry_sdk

from rfiddb.config import AppConfig
from rfiddb.db.connection import ConnectionFailure, get_provider, init_provider

logger = logging.getLogger(__name__)


def _init_sentry(dsn: str, environment: str) -> None:
    """Initialize Sentry SDK if a DSN is configured and not in development."""
    if not dsn or environment == "development":
        return
    sentry_sdk.init(
        dsn,
        environment=environment,
        traces_sample_rate=0,
        send_client_reports=False,
        auto_session_tracking=False,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rfiddb", description="Shared database connection")
    parser.add_argument("--config", type=Path, default=None, help="Path to app.yml")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("info", help="Print the configured connection target")
    sub.add_parser("check", help="Open the shared connection and release it")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    config = AppConfig.from_yaml(args.config)
    _init_sentry(config.sentry_dsn, config.environment)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    init_provider(config)

    if args.command == "info":
        print(get_provider().describe())
        return 0

    try:
        get_provider().connect()
    except ConnectionFailure as e:
        sys.exit(str(e))

    print(f"Connected: {get_provider().describe()}")
    get_provider().disconnect()
    return 0


def cli_entry() -> None:
    """CLI entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
