"""Read sync records from JSON-lines exports of the central server's sync queue."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import SyncRecordPayload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from stocksync.domain.incoming import SyncRecord

log = getLogger(__name__)


def parse_sync_lines(lines: Iterable[str]) -> Iterator[SyncRecord]:
    """Yield a record per non-blank line; invalid lines are logged and skipped."""

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            payload = SyncRecordPayload.model_validate_json(line)
        except ValidationError as exc:
            log.warning("Skipping invalid sync record on line %s: %s", line_number, exc)
            continue
        yield payload.to_sync_record()


def read_sync_file(path: Path) -> Iterator[SyncRecord]:
    """Yield the records of a JSON-lines file lazily, keeping the file open while iterating."""

    with path.open(encoding="utf-8") as handle:
        yield from parse_sync_lines(handle)
