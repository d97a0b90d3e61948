"""Store-scoped number sequences and the numbers handed back for reuse."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from stocksync.domain.model.entity import Entity, attach_dependent
from stocksync.domain.model.enums import EntityType, SequenceKey


@dataclass(eq=False, kw_only=True)
class NumberSequence(Entity):
    """Counter for one kind of serial number, unique per ``sequence_key`` in this store."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.NUMBER_SEQUENCE

    sequence_key: SequenceKey
    highest_number_used: float = 0

    _numbers_to_reuse: list[NumberToReuse] = field(
        default_factory=list["NumberToReuse"], repr=False
    )

    @property
    def numbers_to_reuse(self) -> tuple[NumberToReuse, ...]:
        return tuple(self._numbers_to_reuse)

    def add_number_to_reuse(self, number_to_reuse: NumberToReuse) -> None:
        attach_dependent(self._numbers_to_reuse, number_to_reuse)


@dataclass(eq=False, kw_only=True)
class NumberToReuse(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.NUMBER_TO_REUSE

    number: float | None = None
    number_sequence: NumberSequence | None = field(default=None, repr=False)
