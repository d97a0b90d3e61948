"""
Base building blocks:
identity and the placeholder state shared by every replicated entity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar
from uuid import uuid4

if TYPE_CHECKING:
    from stocksync.domain.model.enums import EntityType


def new_id() -> str:
    return uuid4().hex


@dataclass(eq=False, kw_only=True)
class Entity:
    """Identity is assigned by the central server (or locally for local-only entities).

    ``is_placeholder`` marks entities that only exist to satisfy a forward reference;
    the entity's own sync record clears it when it arrives.
    """

    id: str
    is_placeholder: bool = False

    # class-level discriminator; subclasses must override
    ENTITY_TYPE: ClassVar[EntityType]

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE


def attach_dependent[T](collection: list[T], dependent: T) -> None:
    """Append ``dependent`` unless it is already a member (ORM backrefs may have added it)."""
    if not any(existing is dependent for existing in collection):
        collection.append(dependent)
