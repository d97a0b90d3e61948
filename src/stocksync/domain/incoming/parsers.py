"""Convert wire-format strings into typed values.

The null semantics differ on purpose: an absent number is ``None`` (callers must not
mistake it for ``0``), whereas an absent boolean is simply ``False``.
"""

from __future__ import annotations

import math
from datetime import datetime
from logging import getLogger
from typing import Final

log = getLogger(__name__)

NULL_TIMESTAMP: Final[str] = "0000-00-00T00:00:00"
_TIME_FIELD_LENGTH: Final[int] = 6


def parse_number(value: str | None) -> float | None:
    """Return the decimal value of ``value``, or ``None`` when it is absent or empty.

    Unparseable and non-finite values (``nan``, ``inf``) are treated as absent.
    """
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        log.debug("Unparseable number %r treated as absent", value)
        return None
    if not math.isfinite(number):
        log.debug("Non-finite number %r treated as absent", value)
        return None
    return number


def parse_boolean(value: str | None) -> bool:
    """Return ``True`` only for a case-insensitive ``"true"``."""
    if not value:
        return False
    return value.lower() == "true"


def parse_timestamp(date_value: str | None, time_value: str | None = None) -> datetime | None:
    """Parse an ISO date, optionally overlaying an ``HHMMSS`` time of day.

    Returns ``None`` for empty input and for the server's all-zero null date. An
    out-of-range time such as ``"250000"`` is dropped and the bare date is kept; it is
    not rolled over into the next day. No timezone conversion is applied.
    """
    if not date_value or date_value == NULL_TIMESTAMP:
        return None
    try:
        parsed = datetime.fromisoformat(date_value)
    except ValueError:
        log.debug("Unparseable date %r treated as absent", date_value)
        return None
    if time_value and len(time_value) >= _TIME_FIELD_LENGTH:
        try:
            parsed = parsed.replace(
                hour=int(time_value[0:2]),
                minute=int(time_value[2:4]),
                second=int(time_value[4:6]),
            )
        except ValueError:
            log.debug("Ignoring unparseable time %r for date %r", time_value, date_value)
    return parsed
