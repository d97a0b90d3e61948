from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import inspect, select, text
from sqlalchemy.orm import sessionmaker

from stocksync.adapters.sqlalchemy import create_all_tables, start_mappers
from stocksync.adapters.sqlalchemy.mappings import name_table, number_sequence_table
from stocksync.domain.model import (
    Item,
    ItemBatch,
    Name,
    NameType,
    NumberSequence,
    SequenceKey,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine
    from sqlalchemy.orm import Session


def test_start_mappers_is_idempotent() -> None:
    # First invocation happens in the sqlite_engine fixture; calling again should be harmless.
    start_mappers()
    start_mappers()


def test_create_all_tables_registers_every_entity_table(sqlite_engine: Engine) -> None:
    create_all_tables(sqlite_engine)
    table_names = set(inspect(sqlite_engine).get_table_names())

    for required in (
        "address",
        "item",
        "item_batch",
        "name",
        "number_sequence",
        "requisition_item",
        "setting",
        "stocktake_batch",
        "transaction",
        "transaction_batch",
        "user",
    ):
        assert required in table_names


def test_mappings_round_trip_item_graph(sqlite_engine: Engine, sqlite_session: Session) -> None:
    item = Item(id="item-1", code="AMX", name="Amoxicillin", default_pack_size=1)
    batch = ItemBatch(
        id="batch-1",
        batch="B-001",
        pack_size=1,
        number_of_packs=30,
        expiry_date=datetime(2027, 6, 30),
        cost_price=10,
        sell_price=10,
        item=item,
    )
    sqlite_session.add_all([item, batch])
    sqlite_session.commit()

    with sessionmaker(bind=sqlite_engine)() as session:
        loaded = session.get(Item, "item-1")
        assert loaded is not None
        assert [loaded_batch.id for loaded_batch in loaded.batches] == ["batch-1"]
        loaded_batch = loaded.batches[0]
        assert loaded_batch.item is loaded
        assert loaded_batch.expiry_date == datetime(2027, 6, 30)
        assert loaded_batch.number_of_packs == 30


def test_enumerations_round_trip_and_are_stored_by_name(sqlite_session: Session) -> None:
    sqlite_session.add(
        Name(id="name-1", name="Adjustments", code="INV", type=NameType.INVENTORY_ADJUSTMENT)
    )
    sqlite_session.add(NumberSequence(id="seq-1", sequence_key=SequenceKey.SUPPLIER_INVOICE))
    sqlite_session.flush()

    stored_type = sqlite_session.execute(select(name_table.c.type)).scalar_one()
    stored_key = sqlite_session.execute(select(number_sequence_table.c.sequence_key)).scalar_one()

    assert stored_type is NameType.INVENTORY_ADJUSTMENT
    assert stored_key is SequenceKey.SUPPLIER_INVOICE
    raw_type = sqlite_session.execute(text("SELECT type FROM name")).scalar_one()
    assert raw_type == "INVENTORY_ADJUSTMENT"
