"""Incoming synchronization: merge central-server change records into the local replica."""

from __future__ import annotations

from stocksync.domain.incoming.deletion import delete_entity
from stocksync.domain.incoming.dispatcher import integrate
from stocksync.domain.incoming.errors import (
    IntegrationError,
    PlaceholderTemplateError,
    UnknownChangeTypeError,
)
from stocksync.domain.incoming.integration import create_or_update, integrate_record
from stocksync.domain.incoming.records import SyncRecord

__all__ = [
    "IntegrationError",
    "PlaceholderTemplateError",
    "SyncRecord",
    "UnknownChangeTypeError",
    "create_or_update",
    "delete_entity",
    "integrate",
    "integrate_record",
]
