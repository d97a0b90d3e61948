"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityType(StrEnum):
    """Discriminator for every entity variant kept in the local replica."""

    ADDRESS = "Address"
    ITEM = "Item"
    ITEM_BATCH = "ItemBatch"
    ITEM_CATEGORY = "ItemCategory"
    ITEM_DEPARTMENT = "ItemDepartment"
    ITEM_STORE_JOIN = "ItemStoreJoin"
    MASTER_LIST = "MasterList"
    MASTER_LIST_ITEM = "MasterListItem"
    MASTER_LIST_NAME_JOIN = "MasterListNameJoin"
    NAME = "Name"
    NAME_STORE_JOIN = "NameStoreJoin"
    NUMBER_SEQUENCE = "NumberSequence"
    NUMBER_TO_REUSE = "NumberToReuse"
    REQUISITION = "Requisition"
    REQUISITION_ITEM = "RequisitionItem"
    STOCKTAKE = "Stocktake"
    STOCKTAKE_BATCH = "StocktakeBatch"
    TRANSACTION = "Transaction"
    TRANSACTION_BATCH = "TransactionBatch"
    TRANSACTION_CATEGORY = "TransactionCategory"
    USER = "User"

    # Remote record types the replica has no use for.
    UNKNOWN = "unknown"


class ChangeType(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    UNKNOWN = "unknown"


class Status(StrEnum):
    NEW = "new"
    SUGGESTED = "suggested"
    CONFIRMED = "confirmed"
    FINALISED = "finalised"
    UNKNOWN = "unknown"


class NameType(StrEnum):
    FACILITY = "facility"
    PATIENT = "patient"
    BUILD = "build"
    STORE = "store"
    REPACK = "repack"
    INVENTORY_ADJUSTMENT = "inventory_adjustment"
    UNKNOWN = "unknown"


class TransactionType(StrEnum):
    CUSTOMER_INVOICE = "customer_invoice"
    CUSTOMER_CREDIT = "customer_credit"
    SUPPLIER_INVOICE = "supplier_invoice"
    SUPPLIER_CREDIT = "supplier_credit"
    PRESCRIPTION = "prescription"
    BUILD = "build"
    RECEIPT = "receipt"
    PAYMENT = "payment"
    UNKNOWN = "unknown"


class RequisitionType(StrEnum):
    IMPREST = "imprest"
    FORECAST = "forecast"
    REQUEST = "request"
    RESPONSE = "response"
    UNKNOWN = "unknown"


class SequenceKey(StrEnum):
    """Per-store numbering counters."""

    CUSTOMER_INVOICE = "customer_invoice"
    INVENTORY_ADJUSTMENT = "inventory_adjustment"
    REQUISITION_REQUESTER_REFERENCE = "requisition_requester_reference"
    REQUISITION_SERIAL_NUMBER = "requisition_serial_number"
    STOCKTAKE_SERIAL_NUMBER = "stocktake_serial_number"
    SUPPLIER_INVOICE = "supplier_invoice"
