"""Port for the local data store backing the replica."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from stocksync.domain.model import Entity, EntityType


@runtime_checkable
class Store(Protocol):
    """Narrow create/update/delete/query contract used by the integration engine.

    ``update`` is an upsert keyed on ``fields["id"]``: an existing entity is changed in
    place (its identity is preserved) with every supplied field overwritten, otherwise
    a new entity is created.
    """

    def query(self, entity_type: EntityType, **criteria: object) -> Sequence[Entity]:
        """Return entities whose attributes equal every given criterion."""
        ...

    def create(self, entity_type: EntityType, fields: Mapping[str, object]) -> Entity: ...

    def update(self, entity_type: EntityType, fields: Mapping[str, object]) -> Entity: ...

    def delete(self, entity_type: EntityType, entity: Entity) -> None: ...

    def generate_identifier(self) -> str:
        """Return a new process-wide unique identifier for local-only entities."""
        ...
