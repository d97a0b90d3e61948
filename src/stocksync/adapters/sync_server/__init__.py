"""Public interface for the central sync server's record format."""

from __future__ import annotations

from .reader import parse_sync_lines, read_sync_file
from .schema import SyncRecordPayload

__all__ = [
    "SyncRecordPayload",
    "parse_sync_lines",
    "read_sync_file",
]
