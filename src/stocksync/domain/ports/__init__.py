"""Ports the integration engine consumes from its collaborators."""

from __future__ import annotations

from stocksync.domain.ports.persistence import Store
from stocksync.domain.ports.settings import SettingKey, Settings
from stocksync.domain.ports.unit_of_work import SyncUnitOfWork

__all__ = ["SettingKey", "Settings", "Store", "SyncUnitOfWork"]
