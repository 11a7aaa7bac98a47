"""Unit tests for timestamp helpers."""

import datetime as dt

from marketing_budget.utils.time_utils import month_key, to_iso, utc_now_iso


class TestTimeUtils:
    """Test ISO-8601 timestamp helpers."""

    def test_naive_datetime_is_utc(self):
        """Test millisecond precision and the Z suffix."""
        assert to_iso(dt.datetime(2026, 1, 15, 9, 30)) == "2026-01-15T09:30:00.000Z"

    def test_offset_converted_to_utc(self):
        """Test that aware datetimes are converted."""
        brisbane = dt.timezone(dt.timedelta(hours=10))
        moment = dt.datetime(2026, 1, 1, 8, 0, tzinfo=brisbane)
        assert to_iso(moment) == "2025-12-31T22:00:00.000Z"

    def test_utc_now_iso_with_given_moment(self):
        """Test formatting a supplied moment."""
        moment = dt.datetime(2026, 3, 4, 5, 6, 7, 890000, tzinfo=dt.timezone.utc)
        assert utc_now_iso(moment) == "2026-03-04T05:06:07.890Z"

    def test_utc_now_iso_shape(self):
        """Test the shape of the current timestamp."""
        now = utc_now_iso()
        assert len(now) == 24
        assert now.endswith("Z")

    def test_month_key(self):
        """Test the YYYY-MM prefix."""
        assert month_key("2026-01-15T09:30:00.000Z") == "2026-01"
