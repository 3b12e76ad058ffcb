"""UTC datetime helpers.

Timestamps stored by the admin tables are timezone-aware UTC. SQLite hands
them back naive, so records are normalized with ensure_utc on the way out.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime (used for deleted_at)."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as aware UTC; naive values are taken to be UTC already."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
