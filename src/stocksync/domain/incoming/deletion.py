"""Remove local entities named by delete records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from stocksync.domain.incoming.references import find_entity
from stocksync.domain.incoming.translators import RECORD_TYPES
from stocksync.domain.model import entity_class

if TYPE_CHECKING:
    from stocksync.domain.model import EntityType
    from stocksync.domain.ports.persistence import Store

log = getLogger(__name__)


def delete_entity(store: Store, entity_type: EntityType, record_id: str) -> None:
    """Delete the ``entity_type`` identified by ``record_id`` if it is stored.

    A missing entity is not an error, and no placeholder is created to delete. Detaching
    the entity from collections that held it is left to the store.
    """
    if entity_type not in RECORD_TYPES.internal_values:
        log.debug("Ignoring delete of unsynced type %s", entity_type)
        return
    entity = find_entity(store, entity_class(entity_type), record_id)
    if entity is None:
        log.debug("Nothing to delete for %s %s", entity_type, record_id)
        return
    store.delete(entity_type, entity)
