"""Names (customers, suppliers, stores), their addresses, store joins and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from stocksync.domain.model.entity import Entity, attach_dependent
from stocksync.domain.model.enums import EntityType, NameType

if TYPE_CHECKING:
    from stocksync.domain.model.lists import MasterList
    from stocksync.domain.model.transactions import Transaction


@dataclass(eq=False, kw_only=True)
class Address(Entity):
    """Local-only entity: addresses are deduplicated on their lines, never synced by id."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ADDRESS

    line1: str | None = None
    line2: str | None = None
    line3: str | None = None
    line4: str | None = None
    zip_code: str | None = None


@dataclass(eq=False, kw_only=True)
class User(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.USER

    username: str
    password_hash: str


@dataclass(eq=False, kw_only=True)
class Name(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.NAME

    name: str
    code: str
    type: NameType = NameType.UNKNOWN
    phone_number: str | None = None
    email_address: str | None = None
    billing_address: Address | None = field(default=None, repr=False)
    is_customer: bool = False
    is_supplier: bool = False
    is_manufacturer: bool = False
    supplying_store_id: str | None = None

    # Owned by NameStoreJoin / MasterListNameJoin records, not by the name record itself.
    is_visible: bool = False
    master_list: MasterList | None = field(default=None, repr=False)

    _transactions: list[Transaction] = field(default_factory=list["Transaction"], repr=False)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def add_transaction(self, transaction: Transaction) -> None:
        attach_dependent(self._transactions, transaction)


@dataclass(eq=False, kw_only=True)
class NameStoreJoin(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.NAME_STORE_JOIN

    name_id: str
    joins_this_store: bool = False
