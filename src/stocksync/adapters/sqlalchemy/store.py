"""Store and settings implementations backed by a SQLAlchemy session."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import insert, select, update

from stocksync.adapters.sqlalchemy.mappings import setting_table
from stocksync.domain.model import entity_class, new_id

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from sqlalchemy.orm import Session

    from stocksync.domain.model import Entity, EntityType
    from stocksync.domain.ports.settings import SettingKey

log = getLogger(__name__)


class SqlAlchemyStore:
    """Entity store over one session; every write is flushed immediately.

    Flushing keeps later queries in the same record (placeholder lookups in particular)
    consistent with what has just been written.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def query(self, entity_type: EntityType, **criteria: object) -> Sequence[Entity]:
        stmt = select(entity_class(entity_type)).filter_by(**criteria)
        return self.session.execute(stmt).scalars().all()

    def create(self, entity_type: EntityType, fields: Mapping[str, object]) -> Entity:
        entity = entity_class(entity_type)(**fields)
        self.session.add(entity)
        self.session.flush()
        return entity

    def update(self, entity_type: EntityType, fields: Mapping[str, object]) -> Entity:
        cls = entity_class(entity_type)
        entity = self.session.get(cls, fields["id"])
        if entity is None:
            return self.create(entity_type, fields)
        for name, value in fields.items():
            setattr(entity, name, value)
        self.session.flush()
        return entity

    def delete(self, entity_type: EntityType, entity: Entity) -> None:
        log.debug("Deleting %s %s", entity_type, entity.id)
        self.session.delete(entity)
        self.session.flush()
        # Reload collections that still hold the deleted entity in memory.
        self.session.expire_all()

    def generate_identifier(self) -> str:
        return new_id()


class SqlAlchemySettings:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: SettingKey) -> str | None:
        stmt = select(setting_table.c.value).where(setting_table.c.key == key)
        return self.session.execute(stmt).scalar_one_or_none()

    def set(self, key: SettingKey, value: str) -> None:
        exists = self.session.execute(
            select(setting_table.c.key).where(setting_table.c.key == key)
        ).first()
        if exists is None:
            self.session.execute(insert(setting_table).values(key=key, value=value))
        else:
            self.session.execute(
                update(setting_table).where(setting_table.c.key == key).values(value=value)
            )
