"""Resolve foreign keys in incoming records to local entities.

Records may arrive before the entities they reference. Resolving such a reference
creates a placeholder that the referenced entity's own record later fills in place.

The lookup-then-create sequence is not safe against a concurrent writer; callers
serialise access to the store.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, cast

from stocksync.domain.incoming.placeholders import placeholder_fields

if TYPE_CHECKING:
    from stocksync.domain.model import Entity
    from stocksync.domain.ports.persistence import Store

log = getLogger(__name__)


def find_entity[TEntity: Entity](
    store: Store,
    entity_cls: type[TEntity],
    primary_key: str | None,
    key_field: str = "id",
) -> TEntity | None:
    """Return the existing entity whose ``key_field`` equals ``primary_key``, if any."""
    if not primary_key:
        return None
    results = store.query(entity_cls.ENTITY_TYPE, **{key_field: primary_key})
    if not results:
        return None
    return cast("TEntity", results[0])


def resolve_reference[TEntity: Entity](
    store: Store,
    entity_cls: type[TEntity],
    primary_key: str | None,
    key_field: str = "id",
) -> TEntity | None:
    """Return the referenced entity, creating a placeholder when it is not stored yet.

    An empty key means the relation is legitimately absent and resolves to ``None``.
    Raises :class:`~stocksync.domain.incoming.errors.PlaceholderTemplateError` when the
    entity type cannot be referenced.
    """
    if not primary_key:
        return None
    existing = find_entity(store, entity_cls, primary_key, key_field)
    if existing is not None:
        return existing
    entity_type = entity_cls.ENTITY_TYPE
    fields = placeholder_fields(
        entity_type, primary_key, generate_identifier=store.generate_identifier
    )
    log.debug("Creating placeholder %s for %s=%s", entity_type, key_field, primary_key)
    return cast("TEntity", store.create(entity_type, fields))
