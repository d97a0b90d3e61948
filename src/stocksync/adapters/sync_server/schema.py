"""Pydantic models describing sync records as the central server sends them."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stocksync.domain.incoming import SyncRecord


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _wire_string(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class SyncServerBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SyncRecordPayload(SyncServerBaseModel):
    """One record of a sync batch.

    Field values arrive as strings, but JSON exports also carry numbers, booleans and
    nulls; those are turned into the string the server would have sent, and nulls are
    dropped so that they read as absent fields.
    """

    record_id: str | None = Field(default=None, alias="RecordID")
    record_type: str | None = Field(default=None, alias="RecordType")
    sync_type: str | None = Field(default=None, alias="SyncType")
    data: dict[str, str] | None = None

    _normalize_classifiers = field_validator(
        "record_id", "record_type", "sync_type", mode="before"
    )(_blank_to_none)

    @field_validator("data", mode="before")
    @classmethod
    def _stringify_data(cls, value: object) -> object:
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            return {
                name: _wire_string(field_value)
                for name, field_value in mapping_value.items()
                if field_value is not None
            }
        return value

    def to_sync_record(self) -> SyncRecord:
        return SyncRecord(
            record_type=self.record_type,
            sync_type=self.sync_type,
            record_id=self.record_id,
            data=self.data,
        )
