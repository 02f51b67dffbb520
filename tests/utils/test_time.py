"""Tests for time utilities."""

from datetime import datetime, timedelta, timezone

from freelance_flow.utils.time import ensure_utc, format_receipt_timestamp, utc_now


class TestTimeUtilities:
    """Test receipt timestamp helpers."""

    def test_utc_now_is_aware(self):
        """Test that the clock returns an aware UTC datetime."""
        now = utc_now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_ensure_utc_naive_assumed_utc(self):
        """Test that naive datetimes are treated as UTC."""
        naive = datetime(2024, 1, 1, 9, 0, 0)
        assert ensure_utc(naive) == datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)

    def test_ensure_utc_converts_offset(self):
        """Test conversion from a non-UTC offset."""
        plus_two = timezone(timedelta(hours=2))
        ts = datetime(2024, 1, 1, 11, 0, 0, tzinfo=plus_two)
        assert ensure_utc(ts) == datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)

    def test_format_receipt_timestamp(self):
        """Test the receipt timestamp format."""
        ts = datetime(2024, 3, 1, 12, 30, 5, tzinfo=timezone.utc)
        assert format_receipt_timestamp(ts) == "2024-03-01 12:30:05 UTC"
