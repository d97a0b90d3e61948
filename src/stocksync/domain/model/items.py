"""Items, their classification and the stock batches held against them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from stocksync.domain.model.entity import Entity, attach_dependent
from stocksync.domain.model.enums import EntityType

if TYPE_CHECKING:
    from datetime import datetime

    from stocksync.domain.model.names import Name
    from stocksync.domain.model.transactions import TransactionBatch


@dataclass(eq=False, kw_only=True)
class ItemCategory(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ITEM_CATEGORY

    name: str


@dataclass(eq=False, kw_only=True)
class ItemDepartment(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ITEM_DEPARTMENT

    name: str


@dataclass(eq=False, kw_only=True)
class Item(Entity):
    """A stock line. Pack size is always 1 locally, so ``default_price`` is per unit."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ITEM

    code: str
    name: str
    default_pack_size: float
    default_price: float | None = None
    description: str | None = None
    category: ItemCategory | None = field(default=None, repr=False)
    department: ItemDepartment | None = field(default=None, repr=False)

    # Owned by ItemStoreJoin records.
    is_visible: bool = False

    _batches: list[ItemBatch] = field(default_factory=list["ItemBatch"], repr=False)

    @property
    def batches(self) -> tuple[ItemBatch, ...]:
        return tuple(self._batches)

    def add_batch(self, batch: ItemBatch) -> None:
        attach_dependent(self._batches, batch)


@dataclass(eq=False, kw_only=True)
class ItemBatch(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ITEM_BATCH

    batch: str
    pack_size: float
    number_of_packs: float
    expiry_date: datetime | None
    cost_price: float
    sell_price: float
    item: Item | None = field(default=None, repr=False)
    supplier: Name | None = field(default=None, repr=False)

    _transaction_batches: list[TransactionBatch] = field(
        default_factory=list["TransactionBatch"], repr=False
    )

    @property
    def transaction_batches(self) -> tuple[TransactionBatch, ...]:
        return tuple(self._transaction_batches)

    def add_transaction_batch(self, transaction_batch: TransactionBatch) -> None:
        attach_dependent(self._transaction_batches, transaction_batch)


@dataclass(eq=False, kw_only=True)
class ItemStoreJoin(Entity):
    """Records whether an item is stocked by a store; only joins for this store matter."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ITEM_STORE_JOIN

    item_id: str
    joins_this_store: bool = False
