"""Settings for integrating incoming sync records."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from .env import require_env_vars

STORE_ID_ENV_VAR: Final[str] = "STOCKSYNC_STORE_ID"


@dataclass(frozen=True, slots=True)
class SyncConfig:
    """``store_id`` seeds the replica's own store id when it has none stored yet."""

    store_id: str | None = None


def get_sync_config() -> SyncConfig:
    if os.getenv(STORE_ID_ENV_VAR) is None:
        return SyncConfig()
    # Set but blank is a mistake rather than "no store id".
    values = require_env_vars([STORE_ID_ENV_VAR])
    return SyncConfig(store_id=values[STORE_ID_ENV_VAR])
