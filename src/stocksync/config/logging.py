"""Logging setup for the stocksync command line."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for an integration run.

    Skipped records are logged at DEBUG, so ``stocksync integrate --verbose`` passes
    ``logging.DEBUG`` here. ``force=True`` replaces handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
