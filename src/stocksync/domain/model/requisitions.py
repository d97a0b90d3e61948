"""Requisitions (stock orders) and their lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from stocksync.domain.model.entity import Entity, attach_dependent
from stocksync.domain.model.enums import EntityType, RequisitionType, Status

if TYPE_CHECKING:
    from datetime import datetime

    from stocksync.domain.model.items import Item
    from stocksync.domain.model.names import User


@dataclass(eq=False, kw_only=True)
class Requisition(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.REQUISITION

    serial_number: str
    entry_date: datetime | None
    status: Status = Status.UNKNOWN
    type: RequisitionType = RequisitionType.UNKNOWN
    days_to_supply: float | None = None
    user: User | None = field(default=None, repr=False)

    _items: list[RequisitionItem] = field(default_factory=list["RequisitionItem"], repr=False)

    @property
    def items(self) -> tuple[RequisitionItem, ...]:
        return tuple(self._items)

    def add_item(self, requisition_item: RequisitionItem) -> None:
        attach_dependent(self._items, requisition_item)


@dataclass(eq=False, kw_only=True)
class RequisitionItem(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.REQUISITION_ITEM

    requisition: Requisition | None = field(default=None, repr=False)
    item: Item | None = field(default=None, repr=False)
    stock_on_hand: float | None = None
    daily_usage: float = 0
    imprest_quantity: float | None = None
    required_quantity: float | None = None
    comment: str | None = None
    sort_index: float | None = None
