"""
Data model helpers
"""
from datetime import datetime, UTC


def as_utc(timestamp: datetime) -> datetime:
    """
    Timestamps are always stored as UTC, but some databases, e.g. SQLite, drop the timezone.
    """
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC)
