from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from stocksync.app import integrate_file
from stocksync.config import ConfigurationError, configure_logging, get_sync_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RECORD_FAILURES = 1
EXIT_USAGE = 2


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Integrate central-server sync records")
    subparsers = parser.add_subparsers(dest="command", required=True)

    integrate = subparsers.add_parser(
        "integrate",
        help="Integrate a JSON-lines file of sync records into the local replica",
    )
    integrate.add_argument("path", type=Path, help="JSON-lines file of sync records")
    integrate.add_argument(
        "--store-id",
        type=str,
        help="Identifier of this store (defaults to STOCKSYNC_STORE_ID or the stored value)",
    )
    integrate.add_argument(
        "--verbose",
        action="store_true",
        help="Log skipped records and other debug output",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> int:
    """Main application entry point; returns the process exit code."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO, force=True)

    try:
        if not parsed_args.path.is_file():
            raise ConfigurationError(f"Sync file not found: {parsed_args.path}")  # noqa: TRY301
        store_id = parsed_args.store_id or get_sync_config().store_id
    except ConfigurationError:
        log.exception("CLI validation error")
        return EXIT_USAGE

    try:
        summary = integrate_file(parsed_args.path, store_id=store_id)
    except ConfigurationError:
        log.exception("Configuration error")
        return EXIT_USAGE
    except Exception:
        log.exception("Fatal error during integration")
        return EXIT_RECORD_FAILURES

    for failure in summary.failures:
        log.error(
            "Record %s (%s) failed: %s",
            failure.record_id,
            failure.record_type,
            failure.message,
        )
    return EXIT_RECORD_FAILURES if summary.failed else EXIT_OK


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    sys.exit(main())


if __name__ == "__main__":
    run()
