"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from stocksync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from stocksync.adapters.sync_server import read_sync_file
from stocksync.domain.data_integration import IntegrationSummary, integrate_sync_records
from stocksync.domain.ports.settings import SettingKey
from stocksync.domain.ports.unit_of_work import SyncUnitOfWork

if TYPE_CHECKING:
    from pathlib import Path

UnitOfWorkFactory = Callable[[], SyncUnitOfWork]


log = getLogger(__name__)


def integrate_file(
    path: Path,
    *,
    store_id: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> IntegrationSummary:
    """Integrate every record of a JSON-lines sync export into the local replica.

    ``store_id`` becomes this replica's store id before any record is integrated;
    without it the id already stored in settings is used.
    """

    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyUnitOfWork

    if store_id is not None:
        set_this_store_id(store_id, unit_of_work_factory=unit_of_work_factory)

    log.info("Starting integration of %s", path)
    summary = integrate_sync_records(
        read_sync_file(path),
        unit_of_work_factory=unit_of_work_factory,
    )
    log.info(
        f"Finished integration of {path}: processed={summary.processed}, "
        f"failed={summary.failed}"
    )
    return summary


def set_this_store_id(store_id: str, *, unit_of_work_factory: UnitOfWorkFactory) -> None:
    with unit_of_work_factory() as uow:
        current = uow.settings.get(SettingKey.THIS_STORE_ID)
        if current is not None and current != store_id:
            log.warning("Changing this store id from %s to %s", current, store_id)
        uow.settings.set(SettingKey.THIS_STORE_ID, store_id)
        uow.commit()
