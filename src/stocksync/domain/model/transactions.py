"""Transactions (invoices, credits, adjustments), their lines and categories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from stocksync.domain.model.entity import Entity, attach_dependent
from stocksync.domain.model.enums import EntityType, Status, TransactionType

if TYPE_CHECKING:
    from datetime import datetime

    from stocksync.domain.model.items import ItemBatch
    from stocksync.domain.model.names import Name, User


@dataclass(eq=False, kw_only=True)
class TransactionCategory(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.TRANSACTION_CATEGORY

    name: str
    code: str
    type: TransactionType = TransactionType.UNKNOWN


@dataclass(eq=False, kw_only=True)
class Transaction(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.TRANSACTION

    serial_number: str
    entry_date: datetime | None
    type: TransactionType = TransactionType.UNKNOWN
    status: Status = Status.UNKNOWN
    comment: str | None = None
    their_ref: str | None = None
    confirm_date: datetime | None = None
    other_party: Name | None = field(default=None, repr=False)
    entered_by: User | None = field(default=None, repr=False)
    category: TransactionCategory | None = field(default=None, repr=False)

    _batches: list[TransactionBatch] = field(default_factory=list["TransactionBatch"], repr=False)

    @property
    def batches(self) -> tuple[TransactionBatch, ...]:
        return tuple(self._batches)

    def add_batch(self, transaction_batch: TransactionBatch) -> None:
        attach_dependent(self._batches, transaction_batch)


@dataclass(eq=False, kw_only=True)
class TransactionBatch(Entity):
    """A transaction line. ``item_id``/``item_name`` are kept as sent for display."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.TRANSACTION_BATCH

    item_id: str
    item_name: str
    transaction: Transaction | None = field(default=None, repr=False)
    item_batch: ItemBatch | None = field(default=None, repr=False)
    batch: str | None = None
    expiry_date: datetime | None = None
    pack_size: float = 1
    number_of_packs: float = 0
    number_of_packs_sent: float = 0
    cost_price: float = 0
    sell_price: float = 0
    note: str | None = None
    sort_index: float | None = None
