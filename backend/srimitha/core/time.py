from __future__ import annotations

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp; columns are stored without tz info."""
    return datetime.now(UTC).replace(tzinfo=None)
