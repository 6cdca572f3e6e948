"""Tests for the UTC clock helpers."""

from datetime import datetime, timedelta, timezone

from hubtrack_identity.domain.shared import ensure_tz_aware, utc_now


class TestTime:
    def test_utc_now_is_aware(self):
        assert utc_now().utcoffset() == timedelta(0)

    def test_naive_value_read_as_utc(self):
        result = ensure_tz_aware(datetime(2024, 1, 1, 12, 0))

        assert result == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_other_zone_converted_to_utc(self):
        berlin = timezone(timedelta(hours=2))

        result = ensure_tz_aware(datetime(2024, 6, 1, 14, 0, tzinfo=berlin))

        assert result.tzinfo is timezone.utc
        assert result.hour == 12
