"""Reuse or create Address entities from the address lines carried by name records."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from stocksync.domain.model import EntityType

if TYPE_CHECKING:
    from stocksync.domain.model import Address
    from stocksync.domain.ports.persistence import Store


def resolve_address(
    store: Store,
    line1: str | None = None,
    line2: str | None = None,
    line3: str | None = None,
    line4: str | None = None,
    zip_code: str | None = None,
) -> Address | None:
    """Return an Address matching every supplied field exactly, creating one if needed.

    Fields that are not supplied (``None``) are left unconstrained; an empty string is a
    supplied value. When nothing at all is supplied there is no address to resolve.
    """
    supplied = {
        name: value
        for name, value in (
            ("line1", line1),
            ("line2", line2),
            ("line3", line3),
            ("line4", line4),
            ("zip_code", zip_code),
        )
        if value is not None
    }
    # No address lines means no address; an empty Address row is never created.
    if not supplied:
        return None
    matches = store.query(EntityType.ADDRESS, **supplied)
    if matches:
        return cast("Address", matches[0])
    fields: dict[str, object] = {"id": store.generate_identifier(), **supplied}
    return cast("Address", store.create(EntityType.ADDRESS, fields))
