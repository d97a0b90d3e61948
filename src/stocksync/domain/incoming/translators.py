"""Bidirectional translation tables between central-server codes and internal enums."""

from __future__ import annotations

from enum import Enum, StrEnum
from typing import TYPE_CHECKING, Final, overload

from stocksync.domain.model.enums import (
    ChangeType,
    EntityType,
    NameType,
    RequisitionType,
    SequenceKey,
    Status,
    TransactionType,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Literal


class Direction(Enum):
    EXTERNAL_TO_INTERNAL = "external_to_internal"
    INTERNAL_TO_EXTERNAL = "internal_to_external"


EXTERNAL_TO_INTERNAL: Final = Direction.EXTERNAL_TO_INTERNAL
INTERNAL_TO_EXTERNAL: Final = Direction.INTERNAL_TO_EXTERNAL


class SyncTranslator[TInternal: StrEnum]:
    """One enumeration family.

    Unknown external codes translate to the family's ``unknown`` sentinel; internal
    values without an external code translate to ``None``.
    """

    def __init__(self, mapping: Mapping[TInternal, str], *, unknown: TInternal) -> None:
        self._to_external: dict[TInternal, str] = dict(mapping)
        self._to_internal: dict[str, TInternal] = {
            external: internal for internal, external in mapping.items()
        }
        if len(self._to_internal) != len(self._to_external):
            raise ValueError("External codes must be unique within a translation table")
        self.unknown = unknown

    @property
    def internal_values(self) -> frozenset[TInternal]:
        """Internal values that have an external code."""
        return frozenset(self._to_external)

    @overload
    def translate(
        self, code: str | None, direction: Literal[Direction.EXTERNAL_TO_INTERNAL]
    ) -> TInternal: ...

    @overload
    def translate(
        self, code: str | None, direction: Literal[Direction.INTERNAL_TO_EXTERNAL]
    ) -> str | None: ...

    def translate(self, code: str | None, direction: Direction) -> TInternal | str | None:
        if direction is Direction.EXTERNAL_TO_INTERNAL:
            return self.to_internal(code)
        return self.to_external(code)

    def to_internal(self, code: str | None) -> TInternal:
        if code is None:
            return self.unknown
        return self._to_internal.get(code, self.unknown)

    def to_external(self, value: str | None) -> str | None:
        if value is None:
            return None
        return self._to_external.get(value)  # pyright: ignore[reportArgumentType]


class SequenceKeyTranslator:
    """Sequence names embed the owning store, e.g. ``supplier_invoice_number_for_store_<id>``.

    Each store only owns its own counters, so translating a name that belongs to another
    store yields ``None``.
    """

    def __init__(self, prefixes: Mapping[SequenceKey, str]) -> None:
        self._prefixes = dict(prefixes)

    @overload
    def translate(
        self,
        code: str | None,
        direction: Literal[Direction.EXTERNAL_TO_INTERNAL],
        this_store_id: str | None,
    ) -> SequenceKey | None: ...

    @overload
    def translate(
        self,
        code: str | None,
        direction: Literal[Direction.INTERNAL_TO_EXTERNAL],
        this_store_id: str | None,
    ) -> str | None: ...

    def translate(
        self, code: str | None, direction: Direction, this_store_id: str | None
    ) -> SequenceKey | str | None:
        if not code or not this_store_id:
            return None
        if direction is Direction.EXTERNAL_TO_INTERNAL:
            for key, prefix in self._prefixes.items():
                if code == f"{prefix}{this_store_id}":
                    return key
            return None
        prefix = self._prefixes.get(code)  # pyright: ignore[reportArgumentType]
        return f"{prefix}{this_store_id}" if prefix is not None else None


RECORD_TYPES: Final = SyncTranslator[EntityType](
    {
        EntityType.ITEM: "item",
        EntityType.ITEM_BATCH: "item_line",
        EntityType.ITEM_CATEGORY: "item_category",
        EntityType.ITEM_DEPARTMENT: "item_department",
        EntityType.ITEM_STORE_JOIN: "item_store_join",
        EntityType.MASTER_LIST: "list_master",
        EntityType.MASTER_LIST_ITEM: "list_master_line",
        EntityType.MASTER_LIST_NAME_JOIN: "list_master_name_join",
        EntityType.NAME: "name",
        EntityType.NAME_STORE_JOIN: "name_store_join",
        EntityType.NUMBER_SEQUENCE: "number",
        EntityType.NUMBER_TO_REUSE: "number_reuse",
        EntityType.REQUISITION: "requisition",
        EntityType.REQUISITION_ITEM: "requisition_line",
        EntityType.STOCKTAKE: "Stock_take",
        EntityType.STOCKTAKE_BATCH: "Stock_take_lines",
        EntityType.TRANSACTION: "transact",
        EntityType.TRANSACTION_BATCH: "trans_line",
        EntityType.TRANSACTION_CATEGORY: "transaction_category",
    },
    unknown=EntityType.UNKNOWN,
)

SYNC_TYPES: Final = SyncTranslator[ChangeType](
    {
        ChangeType.CREATE: "I",
        ChangeType.UPDATE: "U",
        ChangeType.DELETE: "D",
    },
    unknown=ChangeType.UNKNOWN,
)

STATUSES: Final = SyncTranslator[Status](
    {
        Status.NEW: "nw",
        Status.SUGGESTED: "sg",
        Status.CONFIRMED: "cn",
        Status.FINALISED: "fn",
    },
    unknown=Status.UNKNOWN,
)

NAME_TYPES: Final = SyncTranslator[NameType](
    {
        NameType.FACILITY: "facility",
        NameType.PATIENT: "patient",
        NameType.BUILD: "build",
        NameType.STORE: "store",
        NameType.REPACK: "repack",
        NameType.INVENTORY_ADJUSTMENT: "invad",
    },
    unknown=NameType.UNKNOWN,
)

TRANSACTION_TYPES: Final = SyncTranslator[TransactionType](
    {
        TransactionType.CUSTOMER_INVOICE: "ci",
        TransactionType.CUSTOMER_CREDIT: "cc",
        TransactionType.SUPPLIER_INVOICE: "si",
        TransactionType.SUPPLIER_CREDIT: "sc",
        TransactionType.PRESCRIPTION: "pi",
        TransactionType.BUILD: "bu",
        TransactionType.RECEIPT: "rc",
        TransactionType.PAYMENT: "ps",
    },
    unknown=TransactionType.UNKNOWN,
)

REQUISITION_TYPES: Final = SyncTranslator[RequisitionType](
    {
        RequisitionType.IMPREST: "im",
        RequisitionType.FORECAST: "sh",
        RequisitionType.REQUEST: "request",
        RequisitionType.RESPONSE: "response",
    },
    unknown=RequisitionType.UNKNOWN,
)

SEQUENCE_KEYS: Final = SequenceKeyTranslator(
    {
        SequenceKey.CUSTOMER_INVOICE: "customer_invoice_number_for_store_",
        SequenceKey.INVENTORY_ADJUSTMENT: "inventory_adjustment_serial_number_for_store_",
        SequenceKey.REQUISITION_REQUESTER_REFERENCE: "requisition_requester_reference_for_store_",
        SequenceKey.REQUISITION_SERIAL_NUMBER: "requisition_serial_number_for_store_",
        SequenceKey.STOCKTAKE_SERIAL_NUMBER: "stock_take_number_for_store_",
        SequenceKey.SUPPLIER_INVOICE: "supplier_invoice_number_for_store_",
    }
)
