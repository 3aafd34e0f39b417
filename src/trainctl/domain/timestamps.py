"""Wall-clock helpers shared by validation and lifecycle code."""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime.

    Naive datetimes are interpreted as UTC; aware ones are converted.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def resolve_now(now: datetime | None) -> datetime:
    """Use the caller-supplied *now* if given, otherwise read the clock."""
    return utc_now() if now is None else ensure_utc(now)
