"""Errors that are fatal for the record being integrated.

Malformed or unsupported records are skipped silently instead; only conditions that
point at a protocol change or a programming defect are raised.
"""

from __future__ import annotations


class IntegrationError(RuntimeError):
    """Raised when a sync record cannot be integrated and must be reported."""


class UnknownChangeTypeError(IntegrationError):
    """The record's sync type is not a known create/update/delete code."""

    def __init__(self, sync_type: str) -> None:
        super().__init__(f"Cannot integrate sync record with sync type {sync_type!r}")
        self.sync_type = sync_type


class PlaceholderTemplateError(IntegrationError):
    """A relation targets an entity type that has no placeholder template."""

    def __init__(self, entity_type: str) -> None:
        super().__init__(f"No placeholder template for entity type {entity_type!r}")
        self.entity_type = entity_type
