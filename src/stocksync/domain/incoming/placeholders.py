"""Default-valued templates for entities created ahead of their own sync record."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Final

from stocksync.domain.incoming.errors import PlaceholderTemplateError
from stocksync.domain.model.enums import (
    EntityType,
    NameType,
    RequisitionType,
    Status,
    TransactionType,
)

if TYPE_CHECKING:
    from collections.abc import Callable

PLACEHOLDER_STRING: Final[str] = "placeholder"
PLACEHOLDER_NUMBER: Final[float] = 0


def placeholder_fields(
    entity_type: EntityType,
    primary_key: str,
    *,
    generate_identifier: Callable[[], str],
    now: datetime | None = None,
) -> dict[str, object]:
    """Return the fields of a placeholder ``entity_type`` identified by ``primary_key``.

    Required strings get ``"placeholder"``, numbers ``0``, dates the current time,
    booleans ``False`` and enumerations their ``UNKNOWN`` member. Number sequences are
    looked up by sequence key, so the key fills ``sequence_key`` and a fresh local id is
    generated. Join and line entities are never the target of a relation and have no
    template.
    """
    timestamp = now or datetime.now()
    fields: dict[str, object]
    match entity_type:
        case EntityType.ADDRESS:
            fields = {}
        case EntityType.ITEM:
            fields = {
                "code": PLACEHOLDER_STRING,
                "name": PLACEHOLDER_STRING,
                "default_pack_size": PLACEHOLDER_NUMBER,
            }
        case EntityType.ITEM_CATEGORY | EntityType.ITEM_DEPARTMENT | EntityType.MASTER_LIST:
            fields = {"name": PLACEHOLDER_STRING}
        case EntityType.ITEM_BATCH:
            fields = {
                "pack_size": PLACEHOLDER_NUMBER,
                "number_of_packs": PLACEHOLDER_NUMBER,
                "expiry_date": timestamp,
                "batch": PLACEHOLDER_STRING,
                "cost_price": PLACEHOLDER_NUMBER,
                "sell_price": PLACEHOLDER_NUMBER,
            }
        case EntityType.NAME:
            fields = {
                "name": PLACEHOLDER_STRING,
                "code": PLACEHOLDER_STRING,
                "type": NameType.UNKNOWN,
                "is_customer": False,
                "is_supplier": False,
                "is_manufacturer": False,
            }
        case EntityType.NUMBER_SEQUENCE:
            return {
                "id": generate_identifier(),
                "is_placeholder": True,
                "sequence_key": primary_key,
                "highest_number_used": PLACEHOLDER_NUMBER,
            }
        case EntityType.REQUISITION:
            fields = {
                "serial_number": PLACEHOLDER_STRING,
                "entry_date": timestamp,
                "status": Status.UNKNOWN,
                "type": RequisitionType.UNKNOWN,
                "days_to_supply": PLACEHOLDER_NUMBER,
            }
        case EntityType.STOCKTAKE:
            fields = {
                "name": PLACEHOLDER_STRING,
                "created_date": timestamp,
                "status": Status.UNKNOWN,
                "serial_number": PLACEHOLDER_STRING,
            }
        case EntityType.TRANSACTION:
            fields = {
                "serial_number": PLACEHOLDER_STRING,
                "comment": PLACEHOLDER_STRING,
                "entry_date": timestamp,
                "type": TransactionType.UNKNOWN,
                "status": Status.UNKNOWN,
                "their_ref": PLACEHOLDER_STRING,
            }
        case EntityType.TRANSACTION_CATEGORY:
            fields = {
                "name": PLACEHOLDER_STRING,
                "code": PLACEHOLDER_STRING,
                "type": TransactionType.UNKNOWN,
            }
        case EntityType.USER:
            fields = {
                "username": PLACEHOLDER_STRING,
                "password_hash": PLACEHOLDER_STRING,
            }
        case _:
            raise PlaceholderTemplateError(entity_type)
    return {"id": primary_key, "is_placeholder": True, **fields}
