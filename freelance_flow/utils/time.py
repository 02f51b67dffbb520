"""
Time utilities for receipt timestamps.

All timestamps are timezone-aware UTC. Naive datetimes are assumed to be UTC.
"""

from datetime import datetime, timezone

RECEIPT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def utc_now() -> datetime:
    """Return the current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


def ensure_utc(ts: datetime) -> datetime:
    """
    Normalize a datetime to UTC.

    Args:
        ts: Aware or naive datetime

    Returns:
        Timezone-aware UTC datetime
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def format_receipt_timestamp(ts: datetime) -> str:
    """Format a timestamp for the receipt log."""
    return ensure_utc(ts).strftime(RECEIPT_TIMESTAMP_FORMAT)
