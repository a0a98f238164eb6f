from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from dockgraph.app import run_monitor, sync_once
from dockgraph.config import (
    ConfigurationError,
    SyncConfig,
    configure_logging,
    get_log_level,
    get_sync_config,
    parse_log_level,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Mirror the containers of a Docker daemon into a SPARQL store"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (defaults to MONITOR_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Reconcile continuously on an interval")
    run.add_argument(
        "--interval-ms",
        type=int,
        help="Delay between cycles in milliseconds (defaults to MONITOR_SYNC_INTERVAL)",
    )
    run.add_argument(
        "--max-cycles",
        type=int,
        help="Stop after this many cycles",
    )

    subparsers.add_parser("sync", help="Run a single reconciliation cycle")

    return parser.parse_args(list(argv))


def _build_sync_config(args: argparse.Namespace) -> SyncConfig:
    config = get_sync_config()
    interval_ms = getattr(args, "interval_ms", None)
    if interval_ms is not None:
        if interval_ms < 0:
            raise ValueError("Interval must be non-negative")
        config = SyncConfig(interval_ms=interval_ms, readiness=config.readiness)
    max_cycles = getattr(args, "max_cycles", None)
    if max_cycles is not None and max_cycles < 1:
        raise ValueError("Max cycles must be at least 1")
    return config


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        level = (
            parse_log_level(parsed_args.log_level) if parsed_args.log_level else get_log_level()
        )
        configure_logging(level=level)
        sync_config = _build_sync_config(parsed_args)
    except (ValueError, ConfigurationError):
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "run":
            asyncio.run(run_monitor(sync=sync_config, max_cycles=parsed_args.max_cycles))
        elif parsed_args.command == "sync":
            result = asyncio.run(sync_once(sync=sync_config))
            log.info("Sync finished: %s", result)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def entrypoint() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    entrypoint()
