"""The sync record value handed to the integration engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class SyncRecord:
    """One change notification from the central server, consumed once.

    ``record_type`` and ``sync_type`` are the server's own codes (e.g. ``"item_line"``
    and ``"U"``); ``data`` is the flat, string-valued field mapping of the record.
    """

    record_type: str | None
    sync_type: str | None
    record_id: str | None = None
    data: Mapping[str, str] | None = field(default=None, repr=False)
