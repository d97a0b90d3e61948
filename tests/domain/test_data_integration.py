from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stocksync.domain import data_integration
from stocksync.domain.data_integration import integrate_sync_records
from stocksync.domain.incoming.references import find_entity
from stocksync.domain.model import EntityType, Item, ItemBatch
from stocksync.domain.ports.settings import SettingKey
from tests.helpers.sync_records import (
    THIS_STORE_ID,
    item_batch_fields,
    item_fields,
    make_record,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from stocksync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

    UnitOfWorkFactory = Callable[[], SqlAlchemyUnitOfWork]


@pytest.fixture
def unit_of_work_factory(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> UnitOfWorkFactory:
    with sqlite_unit_of_work() as uow:
        uow.settings.set(SettingKey.THIS_STORE_ID, THIS_STORE_ID)
        uow.commit()
    return sqlite_unit_of_work


def test_records_are_committed(unit_of_work_factory: UnitOfWorkFactory) -> None:
    records = [
        make_record("item_line", item_batch_fields()),
        make_record("item", item_fields()),
    ]

    summary = integrate_sync_records(records, unit_of_work_factory=unit_of_work_factory)

    assert summary.processed == 2
    assert summary.failed == 0
    assert summary.succeeded == 2
    with unit_of_work_factory() as uow:
        batch = find_entity(uow.store, ItemBatch, "batch-1")
        assert batch is not None
        assert batch.item is not None
        assert batch.item.is_placeholder is False
        assert batch.item.code == "AMX"


def test_failed_record_is_rolled_back_and_batch_continues(
    unit_of_work_factory: UnitOfWorkFactory,
) -> None:
    records = [
        make_record("item", item_fields(ID="item-1")),
        make_record("item", item_fields(ID="item-2"), sync_type="Z"),
        make_record("item", item_fields(ID="item-3")),
    ]

    summary = integrate_sync_records(records, unit_of_work_factory=unit_of_work_factory)

    assert summary.processed == 3
    assert summary.failed == 1
    failure = summary.failures[0]
    assert failure.record_id == "item-2"
    assert failure.record_type == "item"
    assert "'Z'" in failure.message
    with unit_of_work_factory() as uow:
        assert find_entity(uow.store, Item, "item-1") is not None
        assert find_entity(uow.store, Item, "item-2") is None
        assert find_entity(uow.store, Item, "item-3") is not None


def test_non_finite_quantities_do_not_abort_the_batch(
    unit_of_work_factory: UnitOfWorkFactory,
) -> None:
    records = [
        make_record("item_line", item_batch_fields(quantity="nan")),
        make_record("item", item_fields(ID="item-2")),
    ]

    summary = integrate_sync_records(records, unit_of_work_factory=unit_of_work_factory)

    assert summary.failed == 0
    with unit_of_work_factory() as uow:
        batch = find_entity(uow.store, ItemBatch, "batch-1")
        assert batch is not None
        assert batch.number_of_packs == 0
        assert find_entity(uow.store, Item, "item-2") is not None


def test_skipped_records_are_not_failures(unit_of_work_factory: UnitOfWorkFactory) -> None:
    records = [
        make_record("item", item_fields(code="")),
        make_record("report", {"ID": "r-1"}),
    ]

    summary = integrate_sync_records(records, unit_of_work_factory=unit_of_work_factory)

    assert summary.processed == 2
    assert summary.failed == 0
    with unit_of_work_factory() as uow:
        assert uow.store.query(EntityType.ITEM) == []


def test_unexpected_errors_abort_the_batch(
    unit_of_work_factory: UnitOfWorkFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    def explode(*_: object) -> None:
        raise RuntimeError("store offline")

    monkeypatch.setattr(data_integration, "integrate_record", explode)

    with pytest.raises(RuntimeError, match="store offline"):
        integrate_sync_records(
            [make_record("item", item_fields())], unit_of_work_factory=unit_of_work_factory
        )
