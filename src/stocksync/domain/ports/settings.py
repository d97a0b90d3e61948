"""Port for the replica's key/value settings."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable


class SettingKey(StrEnum):
    THIS_STORE_ID = "ThisStoreId"


@runtime_checkable
class Settings(Protocol):
    def get(self, key: SettingKey) -> str | None: ...

    def set(self, key: SettingKey, value: str) -> None: ...
