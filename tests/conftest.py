from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from stocksync.adapters.sqlalchemy import create_all_tables, start_mappers
from stocksync.adapters.sqlalchemy.store import SqlAlchemySettings, SqlAlchemyStore
from stocksync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, shutdown, startup
from stocksync.domain.ports.settings import SettingKey
from tests.helpers.sync_records import THIS_STORE_ID

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:")
    start_mappers()
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(sqlite_session: Session) -> SqlAlchemyStore:
    return SqlAlchemyStore(sqlite_session)


@pytest.fixture
def settings(sqlite_session: Session) -> SqlAlchemySettings:
    sqlite_settings = SqlAlchemySettings(sqlite_session)
    sqlite_settings.set(SettingKey.THIS_STORE_ID, THIS_STORE_ID)
    return sqlite_settings


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()
