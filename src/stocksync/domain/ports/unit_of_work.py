"""Unit-of-work boundary around the store and settings used for one sync session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from stocksync.domain.ports.persistence import Store
    from stocksync.domain.ports.settings import Settings


@runtime_checkable
class SyncUnitOfWork(Protocol):
    """Callers must not share a unit of work between concurrent writers."""

    @property
    def store(self) -> Store: ...

    @property
    def settings(self) -> Settings: ...

    def __enter__(self) -> SyncUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
