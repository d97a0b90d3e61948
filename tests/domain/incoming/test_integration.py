from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stocksync.domain.incoming import SyncRecord, UnknownChangeTypeError, integrate_record
from stocksync.domain.incoming.references import find_entity
from stocksync.domain.model import EntityType, Item
from tests.helpers.sync_records import (
    OTHER_STORE_ID,
    item_fields,
    make_record,
    number_sequence_fields,
    transaction_fields,
)

if TYPE_CHECKING:
    from stocksync.adapters.sqlalchemy.store import SqlAlchemySettings, SqlAlchemyStore


@pytest.mark.parametrize("sync_type", ["I", "U"])
def test_create_and_update_integrate_the_record(
    store: SqlAlchemyStore, settings: SqlAlchemySettings, sync_type: str
) -> None:
    integrate_record(store, settings, make_record("item", item_fields(), sync_type=sync_type))

    item = find_entity(store, Item, "item-1")
    assert item is not None
    assert item.code == "AMX"


def test_item_missing_code_writes_nothing(
    store: SqlAlchemyStore, settings: SqlAlchemySettings
) -> None:
    fields = item_fields()
    del fields["code"]

    integrate_record(store, settings, make_record("item", fields))

    assert store.query(EntityType.ITEM) == []


def test_unclassified_records_are_skipped(
    store: SqlAlchemyStore, settings: SqlAlchemySettings
) -> None:
    integrate_record(store, settings, SyncRecord(record_type=None, sync_type="U", data={}))
    integrate_record(store, settings, SyncRecord(record_type="item", sync_type="", data={}))
    integrate_record(store, settings, make_record("item", None, record_id="item-1"))

    assert store.query(EntityType.ITEM) == []


def test_unsupported_record_types_are_skipped(
    store: SqlAlchemyStore, settings: SqlAlchemySettings
) -> None:
    integrate_record(store, settings, make_record("dashboard_report", {"ID": "r-1"}))
    deletion = make_record("dashboard_report", None, sync_type="D", record_id="r-1")
    integrate_record(store, settings, deletion)


def test_unknown_change_type_is_fatal(store: SqlAlchemyStore, settings: SqlAlchemySettings) -> None:
    with pytest.raises(UnknownChangeTypeError, match="'M'"):
        integrate_record(store, settings, make_record("item", item_fields(), sync_type="M"))

    assert store.query(EntityType.ITEM) == []


def test_delete_removes_the_entity(store: SqlAlchemyStore, settings: SqlAlchemySettings) -> None:
    integrate_record(store, settings, make_record("transact", transaction_fields()))
    assert len(store.query(EntityType.TRANSACTION)) == 1

    deletion = make_record("transact", None, sync_type="D", record_id="trans-1")
    integrate_record(store, settings, deletion)

    assert store.query(EntityType.TRANSACTION) == []


def test_delete_without_record_id_is_skipped(
    store: SqlAlchemyStore, settings: SqlAlchemySettings
) -> None:
    integrate_record(store, settings, make_record("transact", transaction_fields()))

    integrate_record(store, settings, SyncRecord(record_type="transact", sync_type="D"))

    assert len(store.query(EntityType.TRANSACTION)) == 1


def test_foreign_sequence_record_changes_nothing(
    store: SqlAlchemyStore, settings: SqlAlchemySettings
) -> None:
    fields = number_sequence_fields(name=f"customer_invoice_number_for_store_{OTHER_STORE_ID}")

    integrate_record(store, settings, make_record("number", fields))

    assert store.query(EntityType.NUMBER_SEQUENCE) == []
