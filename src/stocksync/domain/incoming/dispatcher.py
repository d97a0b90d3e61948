"""Turn a sanity-checked sync record into its internal entity and upsert it.

Each entity type has one integrator. Integrators parse the raw wire fields, resolve
relations (creating placeholders for anything not yet synced), apply the local
derivations and upsert the complete field set by id. Dependents attach themselves to
their parent's collection; integrating a parent never touches its dependents.

All quantities are stored pack-to-one: pack size is always 1 and pack counts are
already multiplied out by the pack size the server sent.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, assert_never, cast

from stocksync.domain.incoming.addresses import resolve_address
from stocksync.domain.incoming.parsers import parse_boolean, parse_number, parse_timestamp
from stocksync.domain.incoming.references import find_entity, resolve_reference
from stocksync.domain.incoming.translators import (
    EXTERNAL_TO_INTERNAL,
    NAME_TYPES,
    REQUISITION_TYPES,
    SEQUENCE_KEYS,
    STATUSES,
    TRANSACTION_TYPES,
)
from stocksync.domain.model import (
    EntityType,
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
from stocksync.domain.ports.settings import SettingKey

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stocksync.domain.model import Entity
    from stocksync.domain.ports.persistence import Store
    from stocksync.domain.ports.settings import Settings

    type RawFields = Mapping[str, str]

log = getLogger(__name__)

PACK_TO_ONE = 1


def integrate(
    store: Store,
    settings: Settings,
    entity_type: EntityType,
    raw: RawFields,
) -> Entity | None:
    """Integrate ``raw`` as ``entity_type`` and return the stored entity.

    Returns ``None`` when nothing was stored: for entity types that are never synced
    and for sequences owned by another store.
    """
    match entity_type:
        case EntityType.ITEM:
            return _integrate_item(store, raw)
        case EntityType.ITEM_CATEGORY:
            return _upsert(store, ItemCategory, {"id": raw["ID"], "name": raw["Description"]})
        case EntityType.ITEM_DEPARTMENT:
            return _upsert(store, ItemDepartment, {"id": raw["ID"], "name": raw["department"]})
        case EntityType.ITEM_BATCH:
            return _integrate_item_batch(store, raw)
        case EntityType.ITEM_STORE_JOIN:
            return _integrate_item_store_join(store, settings, raw)
        case EntityType.MASTER_LIST:
            return _upsert(
                store,
                MasterList,
                {"id": raw["ID"], "name": raw["description"], "note": raw.get("note")},
            )
        case EntityType.MASTER_LIST_ITEM:
            return _integrate_master_list_item(store, raw)
        case EntityType.MASTER_LIST_NAME_JOIN:
            return _integrate_master_list_name_join(store, raw)
        case EntityType.NAME:
            return _integrate_name(store, raw)
        case EntityType.NAME_STORE_JOIN:
            return _integrate_name_store_join(store, settings, raw)
        case EntityType.NUMBER_SEQUENCE:
            return _integrate_number_sequence(store, settings, raw)
        case EntityType.NUMBER_TO_REUSE:
            return _integrate_number_to_reuse(store, settings, raw)
        case EntityType.REQUISITION:
            return _integrate_requisition(store, raw)
        case EntityType.REQUISITION_ITEM:
            return _integrate_requisition_item(store, raw)
        case EntityType.STOCKTAKE:
            return _integrate_stocktake(store, raw)
        case EntityType.STOCKTAKE_BATCH:
            return _integrate_stocktake_batch(store, raw)
        case EntityType.TRANSACTION:
            return _integrate_transaction(store, raw)
        case EntityType.TRANSACTION_BATCH:
            return _integrate_transaction_batch(store, raw)
        case EntityType.TRANSACTION_CATEGORY:
            return _upsert(
                store,
                TransactionCategory,
                {
                    "id": raw["ID"],
                    "name": raw["category"],
                    "code": raw["code"],
                    "type": TRANSACTION_TYPES.translate(raw["type"], EXTERNAL_TO_INTERNAL),
                },
            )
        case EntityType.ADDRESS | EntityType.USER | EntityType.UNKNOWN:
            # Local-only or unsynced; the server's schema is a superset of ours.
            log.debug("Ignoring record %s of unsynced type %s", raw.get("ID"), entity_type)
            return None
        case _:
            assert_never(entity_type)


# Shared helpers ---------------------------------------------------------------


def _upsert[TEntity: Entity](
    store: Store, entity_cls: type[TEntity], fields: dict[str, object]
) -> TEntity:
    """Write the entity's complete field set; this also turns a placeholder into a real entity."""
    complete = {**fields, "is_placeholder": False}
    return cast("TEntity", store.update(entity_cls.ENTITY_TYPE, complete))


def _per_pack(amount: float | None, pack_size: float | None) -> float:
    if not pack_size or amount is None:
        return 0
    return amount / pack_size


def _packs(quantity: float | None, pack_size: float | None) -> float:
    return (quantity or 0) * (pack_size or 0)


def _this_store_id(settings: Settings) -> str | None:
    return settings.get(SettingKey.THIS_STORE_ID)


# Items ------------------------------------------------------------------------


def _integrate_item(store: Store, raw: RawFields) -> Item:
    pack_size = parse_number(raw["default_pack_size"])
    return _upsert(
        store,
        Item,
        {
            "id": raw["ID"],
            "code": raw["code"],
            "name": raw["item_name"],
            "description": raw.get("description"),
            "default_pack_size": PACK_TO_ONE,
            "default_price": _per_pack(parse_number(raw.get("buy_price")), pack_size),
            "category": resolve_reference(store, ItemCategory, raw.get("category_ID")),
            "department": resolve_reference(store, ItemDepartment, raw.get("department_ID")),
        },
    )


def _integrate_item_batch(store: Store, raw: RawFields) -> ItemBatch:
    item = resolve_reference(store, Item, raw["item_ID"])
    pack_size = parse_number(raw["pack_size"])
    sell_price = _per_pack(parse_number(raw["sell_price"]), pack_size)
    item_batch = _upsert(
        store,
        ItemBatch,
        {
            "id": raw["ID"],
            "item": item,
            "batch": raw["batch"],
            "expiry_date": parse_timestamp(raw["expiry_date"]),
            "pack_size": PACK_TO_ONE,
            "number_of_packs": _packs(parse_number(raw["quantity"]), pack_size),
            # The server's cost price is not trusted for batches; both follow the sell price.
            "cost_price": sell_price,
            "sell_price": sell_price,
            "supplier": resolve_reference(store, Name, raw.get("name_ID")),
        },
    )
    if item is not None:
        item.add_batch(item_batch)
    return item_batch


def _integrate_item_store_join(store: Store, settings: Settings, raw: RawFields) -> ItemStoreJoin:
    joins_this_store = raw["store_ID"] == _this_store_id(settings)
    join = _upsert(
        store,
        ItemStoreJoin,
        {"id": raw["ID"], "item_id": raw["item_ID"], "joins_this_store": joins_this_store},
    )
    if joins_this_store:
        item = resolve_reference(store, Item, raw["item_ID"])
        if item is not None:
            store.update(
                EntityType.ITEM,
                {"id": item.id, "is_visible": not parse_boolean(raw.get("inactive"))},
            )
    return join


# Master lists -----------------------------------------------------------------


def _integrate_master_list_item(store: Store, raw: RawFields) -> MasterListItem:
    master_list = resolve_reference(store, MasterList, raw.get("item_master_ID"))
    master_list_item = _upsert(
        store,
        MasterListItem,
        {
            "id": raw["ID"],
            "item": resolve_reference(store, Item, raw["item_ID"]),
            "master_list": master_list,
            "imprest_quantity": parse_number(raw.get("imprest_quan")),
        },
    )
    if master_list is not None:
        master_list.add_item(master_list_item)
    return master_list_item


def _integrate_master_list_name_join(store: Store, raw: RawFields) -> MasterListNameJoin:
    name = resolve_reference(store, Name, raw["name_ID"])
    master_list = resolve_reference(store, MasterList, raw["list_master_ID"])
    if name is not None:
        store.update(EntityType.NAME, {"id": name.id, "master_list": master_list})
    return _upsert(
        store,
        MasterListNameJoin,
        {"id": raw["ID"], "name": name, "master_list": master_list},
    )


# Names ------------------------------------------------------------------------


def _integrate_name(store: Store, raw: RawFields) -> Name:
    return _upsert(
        store,
        Name,
        {
            "id": raw["ID"],
            "name": raw["name"],
            "code": raw["code"],
            "type": NAME_TYPES.translate(raw["type"], EXTERNAL_TO_INTERNAL),
            "phone_number": raw.get("phone"),
            "email_address": raw.get("email"),
            "billing_address": resolve_address(
                store,
                raw.get("bill_address1"),
                raw.get("bill_address2"),
                raw.get("bill_address3"),
                raw.get("bill_address4"),
                raw.get("bill_postal_zip_code"),
            ),
            "is_customer": parse_boolean(raw["customer"]),
            "is_supplier": parse_boolean(raw["supplier"]),
            "is_manufacturer": parse_boolean(raw["manufacturer"]),
            "supplying_store_id": raw.get("supplying_store_id"),
        },
    )


def _integrate_name_store_join(store: Store, settings: Settings, raw: RawFields) -> NameStoreJoin:
    joins_this_store = raw["store_ID"] == _this_store_id(settings)
    join = _upsert(
        store,
        NameStoreJoin,
        {"id": raw["ID"], "name_id": raw["name_ID"], "joins_this_store": joins_this_store},
    )
    if joins_this_store:
        name = resolve_reference(store, Name, raw["name_ID"])
        if name is not None:
            store.update(
                EntityType.NAME,
                {"id": name.id, "is_visible": not parse_boolean(raw.get("inactive"))},
            )
    return join


# Number sequences ---------------------------------------------------------------


def _integrate_number_sequence(
    store: Store, settings: Settings, raw: RawFields
) -> NumberSequence | None:
    sequence_key = SEQUENCE_KEYS.translate(
        raw["name"], EXTERNAL_TO_INTERNAL, _this_store_id(settings)
    )
    if sequence_key is None:
        log.debug("Skipping number sequence %s owned by another store", raw["name"])
        return None
    # A sequence may already exist under a local id, created as a placeholder for a
    # number to reuse; the key identifies it.
    existing = find_entity(store, NumberSequence, sequence_key, key_field="sequence_key")
    return _upsert(
        store,
        NumberSequence,
        {
            "id": existing.id if existing is not None else raw["ID"],
            "sequence_key": sequence_key,
            "highest_number_used": parse_number(raw["value"]) or 0,
        },
    )


def _integrate_number_to_reuse(
    store: Store, settings: Settings, raw: RawFields
) -> NumberToReuse | None:
    sequence_key = SEQUENCE_KEYS.translate(
        raw["name"], EXTERNAL_TO_INTERNAL, _this_store_id(settings)
    )
    if sequence_key is None:
        log.debug("Skipping number to reuse for sequence %s owned by another store", raw["name"])
        return None
    number_sequence = resolve_reference(
        store, NumberSequence, sequence_key, key_field="sequence_key"
    )
    number_to_reuse = _upsert(
        store,
        NumberToReuse,
        {
            "id": raw["ID"],
            "number_sequence": number_sequence,
            "number": parse_number(raw["number_to_use"]),
        },
    )
    if number_sequence is not None:
        number_sequence.add_number_to_reuse(number_to_reuse)
    return number_to_reuse


# Requisitions -----------------------------------------------------------------


def _integrate_requisition(store: Store, raw: RawFields) -> Requisition:
    return _upsert(
        store,
        Requisition,
        {
            "id": raw["ID"],
            "serial_number": raw["serial_number"],
            "entry_date": parse_timestamp(raw["date_entered"]),
            "status": STATUSES.translate(raw["status"], EXTERNAL_TO_INTERNAL),
            "type": REQUISITION_TYPES.translate(raw["type"], EXTERNAL_TO_INTERNAL),
            "days_to_supply": parse_number(raw["daysToSupply"]),
            "user": resolve_reference(store, User, raw.get("user_ID")),
        },
    )


def _integrate_requisition_item(store: Store, raw: RawFields) -> RequisitionItem:
    requisition = resolve_reference(store, Requisition, raw["requisition_ID"])
    days_to_supply = requisition.days_to_supply if requisition is not None else None
    customer_stock_order = parse_number(raw["Cust_stock_order"])
    daily_usage = (customer_stock_order or 0) / days_to_supply if days_to_supply else 0
    requisition_item = _upsert(
        store,
        RequisitionItem,
        {
            "id": raw["ID"],
            "requisition": requisition,
            "item": resolve_reference(store, Item, raw["item_ID"]),
            "stock_on_hand": parse_number(raw["stock_on_hand"]),
            "daily_usage": daily_usage,
            "imprest_quantity": parse_number(raw.get("imprest_or_prev_quantity")),
            "required_quantity": parse_number(raw.get("actualQuan")),
            "comment": raw.get("comment"),
            "sort_index": parse_number(raw.get("line_number")),
        },
    )
    if requisition is not None:
        requisition.add_item(requisition_item)
    return requisition_item


# Stocktakes -------------------------------------------------------------------


def _integrate_stocktake(store: Store, raw: RawFields) -> Stocktake:
    return _upsert(
        store,
        Stocktake,
        {
            "id": raw["ID"],
            "name": raw["Description"],
            "serial_number": raw["serial_number"],
            "created_date": parse_timestamp(raw["stock_take_created_date"]),
            "stocktake_date": parse_timestamp(
                raw.get("stock_take_date"), raw.get("stock_take_time")
            ),
            "status": STATUSES.translate(raw["status"], EXTERNAL_TO_INTERNAL),
            "comment": raw.get("comment"),
            "created_by": resolve_reference(store, User, raw.get("created_by_ID")),
            "finalised_by": resolve_reference(store, User, raw.get("finalised_by_ID")),
            "additions": resolve_reference(store, Transaction, raw.get("invad_additions_ID")),
            "reductions": resolve_reference(store, Transaction, raw.get("invad_reductions_ID")),
        },
    )


def _integrate_stocktake_batch(store: Store, raw: RawFields) -> StocktakeBatch:
    stocktake = resolve_reference(store, Stocktake, raw["stock_take_ID"])
    pack_size = parse_number(raw["snapshot_packsize"])
    number_of_packs = _packs(parse_number(raw["snapshot_qty"]), pack_size)
    stocktake_batch = _upsert(
        store,
        StocktakeBatch,
        {
            "id": raw["ID"],
            "stocktake": stocktake,
            "item_batch": resolve_reference(store, ItemBatch, raw["item_line_ID"]),
            "batch": raw["Batch"],
            "expiry": parse_timestamp(raw["expiry"]),
            "pack_size": PACK_TO_ONE,
            "snapshot_number_of_packs": number_of_packs,
            "counted_number_of_packs": number_of_packs,
            "cost_price": _per_pack(parse_number(raw["cost_price"]), pack_size),
            "sell_price": _per_pack(parse_number(raw["sell_price"]), pack_size),
            "sort_index": parse_number(raw.get("line_number")),
        },
    )
    if stocktake is not None:
        stocktake.add_batch(stocktake_batch)
    return stocktake_batch


# Transactions -----------------------------------------------------------------


def _integrate_transaction(store: Store, raw: RawFields) -> Transaction:
    other_party = resolve_reference(store, Name, raw["name_ID"])
    transaction = _upsert(
        store,
        Transaction,
        {
            "id": raw["ID"],
            "serial_number": raw["invoice_num"],
            "comment": raw.get("comment"),
            "entry_date": parse_timestamp(raw["entry_date"]),
            "type": TRANSACTION_TYPES.translate(raw["type"], EXTERNAL_TO_INTERNAL),
            "status": STATUSES.translate(raw["status"], EXTERNAL_TO_INTERNAL),
            "confirm_date": parse_timestamp(raw.get("confirm_date")),
            "their_ref": raw.get("their_ref"),
            "other_party": other_party,
            "entered_by": resolve_reference(store, User, raw.get("user_ID")),
            "category": resolve_reference(store, TransactionCategory, raw.get("category_ID")),
        },
    )
    if other_party is not None:
        other_party.add_transaction(transaction)
    return transaction


def _integrate_transaction_batch(store: Store, raw: RawFields) -> TransactionBatch:
    transaction = resolve_reference(store, Transaction, raw["transaction_ID"])
    item_batch = resolve_reference(store, ItemBatch, raw["item_line_ID"])
    item = resolve_reference(store, Item, raw["item_ID"])
    if item_batch is not None and item is not None:
        # The line's item is authoritative; repair a stale or placeholder batch link.
        store.update(EntityType.ITEM_BATCH, {"id": item_batch.id, "item": item})
        item.add_batch(item_batch)

    pack_size = parse_number(raw["pack_size"])
    number_of_packs = _packs(parse_number(raw["quantity"]), pack_size)
    transaction_batch = _upsert(
        store,
        TransactionBatch,
        {
            "id": raw["ID"],
            "item_id": raw["item_ID"],
            "item_name": raw["item_name"],
            "item_batch": item_batch,
            "transaction": transaction,
            "batch": raw["batch"],
            "expiry_date": parse_timestamp(raw["expiry_date"]),
            "pack_size": PACK_TO_ONE,
            "number_of_packs": number_of_packs,
            "number_of_packs_sent": number_of_packs,
            "cost_price": _per_pack(parse_number(raw["cost_price"]), pack_size),
            "sell_price": _per_pack(parse_number(raw["sell_price"]), pack_size),
            "note": raw.get("note"),
            "sort_index": parse_number(raw.get("line_number")),
        },
    )
    if transaction is not None:
        transaction.add_batch(transaction_batch)
    if item_batch is not None:
        item_batch.add_transaction_batch(transaction_batch)
    return transaction_batch
