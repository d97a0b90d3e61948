"""SQLAlchemy adapter package for stocksync."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .store import SqlAlchemySettings, SqlAlchemyStore
from .unit_of_work import (
    SqlAlchemyUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemySettings",
    "SqlAlchemyStore",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "mapper_registry",
    "shutdown",
    "startup",
    "start_mappers",
]
