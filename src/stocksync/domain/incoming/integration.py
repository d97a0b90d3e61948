"""Entry point for one incoming sync record: classify, validate, then dispatch."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from stocksync.domain.incoming.deletion import delete_entity
from stocksync.domain.incoming.dispatcher import integrate
from stocksync.domain.incoming.errors import UnknownChangeTypeError
from stocksync.domain.incoming.sanity import is_sufficient
from stocksync.domain.incoming.translators import EXTERNAL_TO_INTERNAL, RECORD_TYPES, SYNC_TYPES
from stocksync.domain.model import ChangeType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stocksync.domain.incoming.records import SyncRecord
    from stocksync.domain.model import EntityType
    from stocksync.domain.ports.persistence import Store
    from stocksync.domain.ports.settings import Settings

log = getLogger(__name__)


def integrate_record(store: Store, settings: Settings, record: SyncRecord) -> None:
    """Apply ``record`` to the store inside the caller's transaction.

    Records without a type or change type, incomplete records and records for types the
    replica does not keep are skipped. Raises
    :class:`~stocksync.domain.incoming.errors.UnknownChangeTypeError` for a change type
    outside create/update/delete.
    """
    if not record.record_type or not record.sync_type:
        log.debug("Skipping unclassified sync record %s", record.record_id)
        return
    entity_type = RECORD_TYPES.translate(record.record_type, EXTERNAL_TO_INTERNAL)
    change_type = SYNC_TYPES.translate(record.sync_type, EXTERNAL_TO_INTERNAL)
    match change_type:
        case ChangeType.CREATE | ChangeType.UPDATE:
            if record.data is None:
                log.debug(
                    "Skipping %s record %s without data", record.record_type, record.record_id
                )
                return
            create_or_update(store, settings, entity_type, record.data)
        case ChangeType.DELETE:
            if not record.record_id:
                log.debug("Skipping %s delete without a record id", record.record_type)
                return
            delete_entity(store, entity_type, record.record_id)
        case ChangeType.UNKNOWN:
            raise UnknownChangeTypeError(record.sync_type)


def create_or_update(
    store: Store, settings: Settings, entity_type: EntityType, fields: Mapping[str, str]
) -> None:
    if not is_sufficient(entity_type, fields):
        return
    integrate(store, settings, entity_type, fields)
