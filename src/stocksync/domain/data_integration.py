"""Application service that applies a batch of incoming sync records."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from stocksync.domain.incoming import IntegrationError, integrate_record

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from stocksync.domain.incoming import SyncRecord
    from stocksync.domain.ports.unit_of_work import SyncUnitOfWork

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RecordFailure:
    """A record that was rolled back because it could not be integrated."""

    record_id: str | None
    record_type: str | None
    message: str


@dataclass(slots=True)
class IntegrationSummary:
    """Outcome of integrating a batch of sync records."""

    processed: int = 0
    failures: list[RecordFailure] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def succeeded(self) -> int:
        return self.processed - self.failed


def integrate_sync_records(
    records: Iterable[SyncRecord],
    *,
    unit_of_work_factory: Callable[[], SyncUnitOfWork],
) -> IntegrationSummary:
    """Integrate ``records`` in order, one transaction per record.

    A record that raises :class:`IntegrationError` is rolled back and reported; the
    batch continues with the next record. Any other exception aborts the batch after
    rolling back the current record.
    """

    summary = IntegrationSummary()
    with unit_of_work_factory() as uow:
        for record in records:
            summary.processed += 1
            try:
                integrate_record(uow.store, uow.settings, record)
            except IntegrationError as exc:
                uow.rollback()
                log.warning(
                    "Failed to integrate %s record %s: %s",
                    record.record_type,
                    record.record_id,
                    exc,
                )
                summary.failures.append(
                    RecordFailure(
                        record_id=record.record_id,
                        record_type=record.record_type,
                        message=str(exc),
                    )
                )
                continue
            uow.commit()
    log.info("Integrated %s sync records, %s failed", summary.processed, summary.failed)
    return summary
