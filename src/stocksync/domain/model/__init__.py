"""Public domain model surface."""

from __future__ import annotations

from typing import Final

from stocksync.domain.model.entity import Entity, new_id
from stocksync.domain.model.enums import (
    ChangeType,
    EntityType,
    NameType,
    RequisitionType,
    SequenceKey,
    Status,
    TransactionType,
)
from stocksync.domain.model.items import (
    Item,
    ItemBatch,
    ItemCategory,
    ItemDepartment,
    ItemStoreJoin,
)
from stocksync.domain.model.lists import MasterList, MasterListItem, MasterListNameJoin
from stocksync.domain.model.names import Address, Name, NameStoreJoin, User
from stocksync.domain.model.numbering import NumberSequence, NumberToReuse
from stocksync.domain.model.requisitions import Requisition, RequisitionItem
from stocksync.domain.model.stocktakes import Stocktake, StocktakeBatch
from stocksync.domain.model.transactions import (
    Transaction,
    TransactionBatch,
    TransactionCategory,
)

ENTITY_CLASSES: Final[dict[EntityType, type[Entity]]] = {
    cls.ENTITY_TYPE: cls
    for cls in (
        Address,
        Item,
        ItemBatch,
        ItemCategory,
        ItemDepartment,
        ItemStoreJoin,
        MasterList,
        MasterListItem,
        MasterListNameJoin,
        Name,
        NameStoreJoin,
        NumberSequence,
        NumberToReuse,
        Requisition,
        RequisitionItem,
        Stocktake,
        StocktakeBatch,
        Transaction,
        TransactionBatch,
        TransactionCategory,
        User,
    )
}


def entity_class(entity_type: EntityType) -> type[Entity]:
    """Return the class for ``entity_type``; ``UNKNOWN`` has none."""
    try:
        return ENTITY_CLASSES[entity_type]
    except KeyError:
        raise ValueError(f"No entity class for entity type {entity_type!r}") from None


__all__ = [  # noqa: RUF022
    # base
    "Entity",
    "new_id",
    "ENTITY_CLASSES",
    "entity_class",
    # enums
    "ChangeType",
    "EntityType",
    "NameType",
    "RequisitionType",
    "SequenceKey",
    "Status",
    "TransactionType",
    # items
    "Item",
    "ItemBatch",
    "ItemCategory",
    "ItemDepartment",
    "ItemStoreJoin",
    # master lists
    "MasterList",
    "MasterListItem",
    "MasterListNameJoin",
    # names
    "Address",
    "Name",
    "NameStoreJoin",
    "User",
    # numbering
    "NumberSequence",
    "NumberToReuse",
    # requisitions
    "Requisition",
    "RequisitionItem",
    # stocktakes
    "Stocktake",
    "StocktakeBatch",
    # transactions
    "Transaction",
    "TransactionBatch",
    "TransactionCategory",
]
