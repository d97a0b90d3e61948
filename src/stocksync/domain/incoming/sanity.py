"""Check that an incoming record carries enough data to build its internal entity."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from stocksync.domain.model.enums import EntityType

if TYPE_CHECKING:
    from collections.abc import Mapping

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FieldRequirement:
    """``non_empty`` fields must hold a non-empty string; ``present`` fields may be empty."""

    non_empty: tuple[str, ...] = ()
    present: tuple[str, ...] = ()

    def satisfied_by(self, fields: Mapping[str, str]) -> bool:
        return all(fields.get(name) for name in self.non_empty) and all(
            isinstance(fields.get(name), str) for name in self.present
        )


REQUIREMENTS: Final[dict[EntityType, FieldRequirement]] = {
    EntityType.ITEM: FieldRequirement(non_empty=("code", "item_name", "default_pack_size")),
    EntityType.ITEM_CATEGORY: FieldRequirement(present=("Description",)),
    EntityType.ITEM_DEPARTMENT: FieldRequirement(present=("department",)),
    EntityType.ITEM_BATCH: FieldRequirement(
        non_empty=(
            "item_ID",
            "pack_size",
            "quantity",
            "batch",
            "expiry_date",
            "cost_price",
            "sell_price",
        )
    ),
    EntityType.ITEM_STORE_JOIN: FieldRequirement(non_empty=("item_ID", "store_ID")),
    EntityType.MASTER_LIST: FieldRequirement(present=("description",)),
    EntityType.MASTER_LIST_ITEM: FieldRequirement(non_empty=("item_ID",)),
    EntityType.MASTER_LIST_NAME_JOIN: FieldRequirement(non_empty=("name_ID", "list_master_ID")),
    EntityType.NAME: FieldRequirement(
        non_empty=("name", "code", "type", "customer", "supplier", "manufacturer")
    ),
    EntityType.NAME_STORE_JOIN: FieldRequirement(non_empty=("name_ID", "store_ID")),
    EntityType.NUMBER_SEQUENCE: FieldRequirement(non_empty=("name", "value")),
    EntityType.NUMBER_TO_REUSE: FieldRequirement(non_empty=("name", "number_to_use")),
    EntityType.REQUISITION: FieldRequirement(
        non_empty=("status", "date_entered", "type", "daysToSupply", "serial_number")
    ),
    EntityType.REQUISITION_ITEM: FieldRequirement(
        non_empty=("requisition_ID", "item_ID", "stock_on_hand", "Cust_stock_order")
    ),
    EntityType.STOCKTAKE: FieldRequirement(
        non_empty=("Description", "stock_take_created_date", "status", "serial_number")
    ),
    EntityType.STOCKTAKE_BATCH: FieldRequirement(
        non_empty=(
            "stock_take_ID",
            "item_line_ID",
            "snapshot_qty",
            "snapshot_packsize",
            "expiry",
            "Batch",
            "cost_price",
            "sell_price",
        )
    ),
    EntityType.TRANSACTION: FieldRequirement(
        non_empty=("invoice_num", "name_ID", "entry_date", "type", "status")
    ),
    EntityType.TRANSACTION_CATEGORY: FieldRequirement(non_empty=("category", "code", "type")),
    EntityType.TRANSACTION_BATCH: FieldRequirement(
        non_empty=(
            "item_ID",
            "item_name",
            "item_line_ID",
            "batch",
            "expiry_date",
            "pack_size",
            "quantity",
            "transaction_ID",
            "cost_price",
            "sell_price",
        )
    ),
}


def is_sufficient(entity_type: EntityType, fields: Mapping[str, str]) -> bool:
    """Return whether ``fields`` can build an ``entity_type``; never raises.

    Every record needs a non-empty ``ID``. Entity types the replica does not sync
    (including local-only ones such as Address) are rejected.
    """
    if not fields.get("ID"):
        log.debug("Rejecting %s record without an ID", entity_type)
        return False
    requirement = REQUIREMENTS.get(entity_type)
    if requirement is None:
        log.debug("Rejecting record %s of unsynced type %s", fields["ID"], entity_type)
        return False
    if not requirement.satisfied_by(fields):
        log.debug("Rejecting incomplete %s record %s", entity_type, fields["ID"])
        return False
    return True
