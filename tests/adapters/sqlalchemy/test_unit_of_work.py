from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from stocksync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)
from stocksync.domain.model import EntityType
from stocksync.domain.ports import SyncUnitOfWork
from stocksync.domain.ports.settings import SettingKey

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def _item_fields(item_id: str) -> dict[str, object]:
    return {"id": item_id, "code": "AMX", "name": "Amoxicillin", "default_pack_size": 1}


def test_sqlalchemy_unit_of_work_requires_startup() -> None:
    assert not is_started()
    with pytest.raises(StartupError):
        SqlAlchemyUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:")
    engine_b = create_engine("sqlite+pysqlite:///:memory:")

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert configured_engine() is engine_b


def test_store_is_only_available_inside_the_context(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)
    uow = SqlAlchemyUnitOfWork()

    with pytest.raises(StartupError):
        _ = uow.store
    with uow:
        assert isinstance(uow, SyncUnitOfWork)
        assert uow.store.query(EntityType.ITEM) == []
    with pytest.raises(StartupError):
        _ = uow.settings


def test_unit_of_work_commits(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with SqlAlchemyUnitOfWork() as uow:
        uow.store.create(EntityType.ITEM, _item_fields("item-1"))
        uow.settings.set(SettingKey.THIS_STORE_ID, "store-1")
        uow.commit()

    with SqlAlchemyUnitOfWork() as uow:
        assert [item.id for item in uow.store.query(EntityType.ITEM)] == ["item-1"]
        assert uow.settings.get(SettingKey.THIS_STORE_ID) == "store-1"


def test_unit_of_work_rolls_back_on_error(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with pytest.raises(RuntimeError, match="boom"), SqlAlchemyUnitOfWork() as uow:
        uow.store.create(EntityType.ITEM, _item_fields("item-1"))
        raise RuntimeError("boom")

    with SqlAlchemyUnitOfWork() as uow:
        assert uow.store.query(EntityType.ITEM) == []


def test_rollback_discards_only_uncommitted_work(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with SqlAlchemyUnitOfWork() as uow:
        uow.store.create(EntityType.ITEM, _item_fields("item-1"))
        uow.commit()
        uow.store.create(EntityType.ITEM, _item_fields("item-2"))
        uow.rollback()
        assert [item.id for item in uow.store.query(EntityType.ITEM)] == ["item-1"]
