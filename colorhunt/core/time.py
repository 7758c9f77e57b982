"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""

    return datetime.now(timezone.utc)


def isoformat_utc(value: datetime | None) -> str | None:
    """Render a stored timestamp as ISO-8601 UTC with a ``Z`` suffix."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.isoformat() + "Z"
    return value.astimezone(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


__all__ = ["isoformat_utc", "utcnow"]
