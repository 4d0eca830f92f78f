"""Datetime helpers for post dates."""

from __future__ import annotations

from datetime import datetime


def local_midnight(now: datetime | None = None) -> datetime:
    """Return ``now`` in local time with the time of day zeroed.

    Posts are dated, not timestamped. The UTC offset is the one in effect at
    ``now``, so on a DST-change day it can differ from the offset at midnight.
    Naive values are taken as local time.
    """

    current = (now if now is not None else datetime.now()).astimezone()
    return current.replace(hour=0, minute=0, second=0, microsecond=0)


def to_rfc3339(dt: datetime) -> str:
    """Format an aware ``datetime`` as RFC 3339, e.g. ``2024-05-01T00:00:00+02:00``."""

    if dt.tzinfo is None:
        raise ValueError("RFC 3339 timestamps require a timezone-aware datetime")
    return dt.isoformat(timespec="seconds")
