from __future__ import annotations

from enum import StrEnum

import pytest

from stocksync.domain.incoming.translators import (
    EXTERNAL_TO_INTERNAL,
    INTERNAL_TO_EXTERNAL,
    NAME_TYPES,
    RECORD_TYPES,
    REQUISITION_TYPES,
    SEQUENCE_KEYS,
    STATUSES,
    SYNC_TYPES,
    TRANSACTION_TYPES,
    SyncTranslator,
)
from stocksync.domain.model import (
    ChangeType,
    EntityType,
    NameType,
    RequisitionType,
    SequenceKey,
    Status,
    TransactionType,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [("I", ChangeType.CREATE), ("U", ChangeType.UPDATE), ("D", ChangeType.DELETE)],
)
def test_sync_types(code: str, expected: ChangeType) -> None:
    assert SYNC_TYPES.translate(code, EXTERNAL_TO_INTERNAL) is expected


def test_unknown_codes_translate_to_family_sentinel() -> None:
    assert SYNC_TYPES.translate("X", EXTERNAL_TO_INTERNAL) is ChangeType.UNKNOWN
    assert RECORD_TYPES.translate("dashboard", EXTERNAL_TO_INTERNAL) is EntityType.UNKNOWN
    assert STATUSES.translate("zz", EXTERNAL_TO_INTERNAL) is Status.UNKNOWN
    assert NAME_TYPES.translate(None, EXTERNAL_TO_INTERNAL) is NameType.UNKNOWN


def test_record_types_are_case_sensitive() -> None:
    assert RECORD_TYPES.translate("Stock_take", EXTERNAL_TO_INTERNAL) is EntityType.STOCKTAKE
    assert RECORD_TYPES.translate("stock_take", EXTERNAL_TO_INTERNAL) is EntityType.UNKNOWN


def test_translation_is_bidirectional() -> None:
    assert RECORD_TYPES.translate(EntityType.TRANSACTION_BATCH, INTERNAL_TO_EXTERNAL) == (
        "trans_line"
    )
    assert TRANSACTION_TYPES.translate("si", EXTERNAL_TO_INTERNAL) is (
        TransactionType.SUPPLIER_INVOICE
    )
    assert TRANSACTION_TYPES.translate(TransactionType.SUPPLIER_INVOICE, INTERNAL_TO_EXTERNAL) == (
        "si"
    )
    assert REQUISITION_TYPES.translate("sh", EXTERNAL_TO_INTERNAL) is RequisitionType.FORECAST
    assert NAME_TYPES.translate(NameType.INVENTORY_ADJUSTMENT, INTERNAL_TO_EXTERNAL) == "invad"


def test_internal_values_without_code_translate_to_none() -> None:
    assert RECORD_TYPES.translate(EntityType.ADDRESS, INTERNAL_TO_EXTERNAL) is None
    assert STATUSES.translate(Status.UNKNOWN, INTERNAL_TO_EXTERNAL) is None


def test_internal_values_lists_synced_entity_types() -> None:
    assert EntityType.ITEM in RECORD_TYPES.internal_values
    assert EntityType.ADDRESS not in RECORD_TYPES.internal_values
    assert EntityType.USER not in RECORD_TYPES.internal_values
    assert len(RECORD_TYPES.internal_values) == 19


def test_duplicate_external_codes_are_rejected() -> None:
    class Colour(StrEnum):
        RED = "red"
        CRIMSON = "crimson"
        UNKNOWN = "unknown"

    with pytest.raises(ValueError, match="unique"):
        SyncTranslator({Colour.RED: "r", Colour.CRIMSON: "r"}, unknown=Colour.UNKNOWN)


def test_sequence_key_for_this_store() -> None:
    key = SEQUENCE_KEYS.translate(
        "supplier_invoice_number_for_store_abc", EXTERNAL_TO_INTERNAL, "abc"
    )

    assert key is SequenceKey.SUPPLIER_INVOICE


def test_sequence_key_of_another_store_is_none() -> None:
    key = SEQUENCE_KEYS.translate(
        "supplier_invoice_number_for_store_xyz", EXTERNAL_TO_INTERNAL, "abc"
    )

    assert key is None


def test_sequence_key_requires_exact_store_suffix() -> None:
    assert (
        SEQUENCE_KEYS.translate("stock_take_number_for_store_abcd", EXTERNAL_TO_INTERNAL, "abc")
        is None
    )


def test_sequence_key_without_store_id_is_none() -> None:
    assert (
        SEQUENCE_KEYS.translate("stock_take_number_for_store_", EXTERNAL_TO_INTERNAL, None)
        is None
    )


def test_sequence_key_to_external_embeds_store() -> None:
    name = SEQUENCE_KEYS.translate(
        SequenceKey.STOCKTAKE_SERIAL_NUMBER, INTERNAL_TO_EXTERNAL, "abc"
    )

    assert name == "stock_take_number_for_store_abc"
