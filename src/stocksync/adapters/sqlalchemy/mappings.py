"""SQLAlchemy mapping metadata for the replica's domain model."""

from __future__ import annotations

import logging
from functools import cache
from typing import TYPE_CHECKING, Final

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    String,
    Table,
    orm,
)
from sqlalchemy.orm import configure_mappers, relationship

from stocksync.domain.model import (
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
    NameType,
    NumberSequence,
    NumberToReuse,
    Requisition,
    RequisitionItem,
    RequisitionType,
    SequenceKey,
    Status,
    Stocktake,
    StocktakeBatch,
    Transaction,
    TransactionBatch,
    TransactionCategory,
    TransactionType,
    User,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

ID_LENGTH: Final[int] = 64

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def _id_column() -> Column[str]:
    return Column("id", String(ID_LENGTH), primary_key=True)


def _placeholder_column() -> Column[bool]:
    return Column("is_placeholder", Boolean, nullable=False, default=False)


def _reference_column(name: str, target: str) -> Column[str]:
    # Nullable so that deleting the target detaches rather than blocks.
    return Column(name, String(ID_LENGTH), ForeignKey(f"{target}.id"), nullable=True)


# Names ------------------------------------------------------------------------

address_table = Table(
    "address",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("line1", String, nullable=True),
    Column("line2", String, nullable=True),
    Column("line3", String, nullable=True),
    Column("line4", String, nullable=True),
    Column("zip_code", String, nullable=True),
)

user_table = Table(
    "user",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("username", String, nullable=False),
    Column("password_hash", String, nullable=False),
)

name_table = Table(
    "name",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("name", String, nullable=False),
    Column("code", String, nullable=False),
    Column("type", Enum(NameType, native_enum=False), nullable=False),
    Column("phone_number", String, nullable=True),
    Column("email_address", String, nullable=True),
    _reference_column("billing_address_id", "address"),
    Column("is_customer", Boolean, nullable=False),
    Column("is_supplier", Boolean, nullable=False),
    Column("is_manufacturer", Boolean, nullable=False),
    Column("supplying_store_id", String(ID_LENGTH), nullable=True),
    Column("is_visible", Boolean, nullable=False),
    _reference_column("master_list_id", "master_list"),
)

name_store_join_table = Table(
    "name_store_join",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("name_id", String(ID_LENGTH), nullable=False),
    Column("joins_this_store", Boolean, nullable=False),
)

# Items ------------------------------------------------------------------------

item_category_table = Table(
    "item_category",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("name", String, nullable=False),
)

item_department_table = Table(
    "item_department",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("name", String, nullable=False),
)

item_table = Table(
    "item",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("code", String, nullable=False),
    Column("name", String, nullable=False),
    Column("default_pack_size", Float, nullable=False),
    Column("default_price", Float, nullable=True),
    Column("description", String, nullable=True),
    _reference_column("category_id", "item_category"),
    _reference_column("department_id", "item_department"),
    Column("is_visible", Boolean, nullable=False),
)

item_batch_table = Table(
    "item_batch",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("batch", String, nullable=False),
    Column("pack_size", Float, nullable=False),
    Column("number_of_packs", Float, nullable=False),
    Column("expiry_date", DateTime, nullable=True),
    Column("cost_price", Float, nullable=False),
    Column("sell_price", Float, nullable=False),
    _reference_column("item_id", "item"),
    _reference_column("supplier_id", "name"),
)

item_store_join_table = Table(
    "item_store_join",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("item_id", String(ID_LENGTH), nullable=False),
    Column("joins_this_store", Boolean, nullable=False),
)

# Master lists -----------------------------------------------------------------

master_list_table = Table(
    "master_list",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("name", String, nullable=False),
    Column("note", String, nullable=True),
)

master_list_item_table = Table(
    "master_list_item",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    _reference_column("item_id", "item"),
    _reference_column("master_list_id", "master_list"),
    Column("imprest_quantity", Float, nullable=True),
)

master_list_name_join_table = Table(
    "master_list_name_join",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    _reference_column("name_id", "name"),
    _reference_column("master_list_id", "master_list"),
)

# Number sequences ---------------------------------------------------------------

number_sequence_table = Table(
    "number_sequence",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("sequence_key", Enum(SequenceKey, native_enum=False), nullable=False, unique=True),
    Column("highest_number_used", Float, nullable=False),
)

number_to_reuse_table = Table(
    "number_to_reuse",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("number", Float, nullable=True),
    _reference_column("number_sequence_id", "number_sequence"),
)

# Requisitions -----------------------------------------------------------------

requisition_table = Table(
    "requisition",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("serial_number", String, nullable=False),
    Column("entry_date", DateTime, nullable=True),
    Column("status", Enum(Status, native_enum=False), nullable=False),
    Column("type", Enum(RequisitionType, native_enum=False), nullable=False),
    Column("days_to_supply", Float, nullable=True),
    _reference_column("user_id", "user"),
)

requisition_item_table = Table(
    "requisition_item",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    _reference_column("requisition_id", "requisition"),
    _reference_column("item_id", "item"),
    Column("stock_on_hand", Float, nullable=True),
    Column("daily_usage", Float, nullable=False),
    Column("imprest_quantity", Float, nullable=True),
    Column("required_quantity", Float, nullable=True),
    Column("comment", String, nullable=True),
    Column("sort_index", Float, nullable=True),
)

# Transactions -----------------------------------------------------------------

transaction_category_table = Table(
    "transaction_category",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("name", String, nullable=False),
    Column("code", String, nullable=False),
    Column("type", Enum(TransactionType, native_enum=False), nullable=False),
)

transaction_table = Table(
    "transaction",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("serial_number", String, nullable=False),
    Column("entry_date", DateTime, nullable=True),
    Column("type", Enum(TransactionType, native_enum=False), nullable=False),
    Column("status", Enum(Status, native_enum=False), nullable=False),
    Column("comment", String, nullable=True),
    Column("their_ref", String, nullable=True),
    Column("confirm_date", DateTime, nullable=True),
    _reference_column("other_party_id", "name"),
    _reference_column("entered_by_id", "user"),
    _reference_column("category_id", "transaction_category"),
)

transaction_batch_table = Table(
    "transaction_batch",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("item_id", String(ID_LENGTH), nullable=False),
    Column("item_name", String, nullable=False),
    _reference_column("transaction_id", "transaction"),
    _reference_column("item_batch_id", "item_batch"),
    Column("batch", String, nullable=True),
    Column("expiry_date", DateTime, nullable=True),
    Column("pack_size", Float, nullable=False),
    Column("number_of_packs", Float, nullable=False),
    Column("number_of_packs_sent", Float, nullable=False),
    Column("cost_price", Float, nullable=False),
    Column("sell_price", Float, nullable=False),
    Column("note", String, nullable=True),
    Column("sort_index", Float, nullable=True),
)

# Stocktakes -------------------------------------------------------------------

stocktake_table = Table(
    "stocktake",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    Column("name", String, nullable=False),
    Column("serial_number", String, nullable=False),
    Column("created_date", DateTime, nullable=True),
    Column("status", Enum(Status, native_enum=False), nullable=False),
    Column("stocktake_date", DateTime, nullable=True),
    Column("comment", String, nullable=True),
    _reference_column("created_by_id", "user"),
    _reference_column("finalised_by_id", "user"),
    _reference_column("additions_id", "transaction"),
    _reference_column("reductions_id", "transaction"),
)

stocktake_batch_table = Table(
    "stocktake_batch",
    mapper_registry.metadata,
    _id_column(),
    _placeholder_column(),
    _reference_column("stocktake_id", "stocktake"),
    _reference_column("item_batch_id", "item_batch"),
    Column("batch", String, nullable=True),
    Column("expiry", DateTime, nullable=True),
    Column("pack_size", Float, nullable=False),
    Column("snapshot_number_of_packs", Float, nullable=False),
    Column("counted_number_of_packs", Float, nullable=False),
    Column("cost_price", Float, nullable=False),
    Column("sell_price", Float, nullable=False),
    Column("sort_index", Float, nullable=True),
)

# Settings ---------------------------------------------------------------------

setting_table = Table(
    "setting",
    mapper_registry.metadata,
    Column("key", String, primary_key=True),
    Column("value", String, nullable=True),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(Address, address_table)
    mapper_registry.map_imperatively(User, user_table)

    mapper_registry.map_imperatively(
        Name,
        name_table,
        properties={
            "billing_address": relationship(Address),
            "master_list": relationship(MasterList),
            "_transactions": relationship(Transaction, back_populates="other_party"),
        },
    )

    mapper_registry.map_imperatively(NameStoreJoin, name_store_join_table)
    mapper_registry.map_imperatively(ItemCategory, item_category_table)
    mapper_registry.map_imperatively(ItemDepartment, item_department_table)

    mapper_registry.map_imperatively(
        Item,
        item_table,
        properties={
            "category": relationship(ItemCategory),
            "department": relationship(ItemDepartment),
            "_batches": relationship(ItemBatch, back_populates="item"),
        },
    )

    mapper_registry.map_imperatively(
        ItemBatch,
        item_batch_table,
        properties={
            "item": relationship(Item, back_populates="_batches"),
            "supplier": relationship(Name),
            "_transaction_batches": relationship(TransactionBatch, back_populates="item_batch"),
        },
    )

    mapper_registry.map_imperatively(ItemStoreJoin, item_store_join_table)

    mapper_registry.map_imperatively(
        MasterList,
        master_list_table,
        properties={
            "_items": relationship(MasterListItem, back_populates="master_list"),
        },
    )

    mapper_registry.map_imperatively(
        MasterListItem,
        master_list_item_table,
        properties={
            "item": relationship(Item),
            "master_list": relationship(MasterList, back_populates="_items"),
        },
    )

    mapper_registry.map_imperatively(
        MasterListNameJoin,
        master_list_name_join_table,
        properties={
            "name": relationship(Name),
            "master_list": relationship(MasterList),
        },
    )

    mapper_registry.map_imperatively(
        NumberSequence,
        number_sequence_table,
        properties={
            "_numbers_to_reuse": relationship(NumberToReuse, back_populates="number_sequence"),
        },
    )

    mapper_registry.map_imperatively(
        NumberToReuse,
        number_to_reuse_table,
        properties={
            "number_sequence": relationship(NumberSequence, back_populates="_numbers_to_reuse"),
        },
    )

    mapper_registry.map_imperatively(
        Requisition,
        requisition_table,
        properties={
            "user": relationship(User),
            "_items": relationship(RequisitionItem, back_populates="requisition"),
        },
    )

    mapper_registry.map_imperatively(
        RequisitionItem,
        requisition_item_table,
        properties={
            "requisition": relationship(Requisition, back_populates="_items"),
            "item": relationship(Item),
        },
    )

    mapper_registry.map_imperatively(
        TransactionCategory,
        transaction_category_table,
    )

    mapper_registry.map_imperatively(
        Transaction,
        transaction_table,
        properties={
            "other_party": relationship(
                Name,
                back_populates="_transactions",
                foreign_keys=[transaction_table.c.other_party_id],
            ),
            "entered_by": relationship(User, foreign_keys=[transaction_table.c.entered_by_id]),
            "category": relationship(
                TransactionCategory,
                foreign_keys=[transaction_table.c.category_id],
            ),
            "_batches": relationship(
                TransactionBatch,
                back_populates="transaction",
                foreign_keys=[transaction_batch_table.c.transaction_id],
            ),
        },
    )

    mapper_registry.map_imperatively(
        TransactionBatch,
        transaction_batch_table,
        properties={
            "transaction": relationship(
                Transaction,
                back_populates="_batches",
                foreign_keys=[transaction_batch_table.c.transaction_id],
            ),
            "item_batch": relationship(ItemBatch, back_populates="_transaction_batches"),
        },
    )

    mapper_registry.map_imperatively(
        Stocktake,
        stocktake_table,
        properties={
            "created_by": relationship(User, foreign_keys=[stocktake_table.c.created_by_id]),
            "finalised_by": relationship(User, foreign_keys=[stocktake_table.c.finalised_by_id]),
            "additions": relationship(Transaction, foreign_keys=[stocktake_table.c.additions_id]),
            "reductions": relationship(
                Transaction,
                foreign_keys=[stocktake_table.c.reductions_id],
            ),
            "_batches": relationship(StocktakeBatch, back_populates="stocktake"),
        },
    )

    mapper_registry.map_imperatively(
        StocktakeBatch,
        stocktake_batch_table,
        properties={
            "stocktake": relationship(Stocktake, back_populates="_batches"),
            "item_batch": relationship(ItemBatch),
        },
    )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
