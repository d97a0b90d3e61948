"""Master lists: curated item lists assigned to names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from stocksync.domain.model.entity import Entity, attach_dependent
from stocksync.domain.model.enums import EntityType

if TYPE_CHECKING:
    from stocksync.domain.model.items import Item
    from stocksync.domain.model.names import Name


@dataclass(eq=False, kw_only=True)
class MasterList(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.MASTER_LIST

    name: str
    note: str | None = None

    _items: list[MasterListItem] = field(default_factory=list["MasterListItem"], repr=False)

    @property
    def items(self) -> tuple[MasterListItem, ...]:
        return tuple(self._items)

    def add_item(self, master_list_item: MasterListItem) -> None:
        attach_dependent(self._items, master_list_item)


@dataclass(eq=False, kw_only=True)
class MasterListItem(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.MASTER_LIST_ITEM

    item: Item | None = field(default=None, repr=False)
    master_list: MasterList | None = field(default=None, repr=False)
    imprest_quantity: float | None = None


@dataclass(eq=False, kw_only=True)
class MasterListNameJoin(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.MASTER_LIST_NAME_JOIN

    name: Name | None = field(default=None, repr=False)
    master_list: MasterList | None = field(default=None, repr=False)
