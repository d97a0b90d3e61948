"""Stocktakes and the batch snapshots counted during them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from stocksync.domain.model.entity import Entity, attach_dependent
from stocksync.domain.model.enums import EntityType, Status

if TYPE_CHECKING:
    from datetime import datetime

    from stocksync.domain.model.items import ItemBatch
    from stocksync.domain.model.names import User
    from stocksync.domain.model.transactions import Transaction


@dataclass(eq=False, kw_only=True)
class Stocktake(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.STOCKTAKE

    name: str
    serial_number: str
    created_date: datetime | None
    status: Status = Status.UNKNOWN
    stocktake_date: datetime | None = None
    comment: str | None = None
    created_by: User | None = field(default=None, repr=False)
    finalised_by: User | None = field(default=None, repr=False)

    # Inventory adjustments raised when the stocktake was finalised.
    additions: Transaction | None = field(default=None, repr=False)
    reductions: Transaction | None = field(default=None, repr=False)

    _batches: list[StocktakeBatch] = field(default_factory=list["StocktakeBatch"], repr=False)

    @property
    def batches(self) -> tuple[StocktakeBatch, ...]:
        return tuple(self._batches)

    def add_batch(self, stocktake_batch: StocktakeBatch) -> None:
        attach_dependent(self._batches, stocktake_batch)


@dataclass(eq=False, kw_only=True)
class StocktakeBatch(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.STOCKTAKE_BATCH

    stocktake: Stocktake | None = field(default=None, repr=False)
    item_batch: ItemBatch | None = field(default=None, repr=False)
    batch: str | None = None
    expiry: datetime | None = None
    pack_size: float = 1
    snapshot_number_of_packs: float = 0
    counted_number_of_packs: float = 0
    cost_price: float = 0
    sell_price: float = 0
    sort_index: float | None = None
