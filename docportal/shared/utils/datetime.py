"""UTC datetime helpers. Every timestamp leaving the store is timezone-aware UTC."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Return dt as aware UTC; naive values are taken to already be UTC.

    SQLite hands back naive datetimes even for timezone-aware columns, so
    repositories normalize through this before building DTOs.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
