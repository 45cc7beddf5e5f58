"""Tests for Retry-After parsing."""

from datetime import UTC, datetime, timedelta
from email.utils import format_datetime

from enka_api import parse_retry_after

NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


class TestParseRetryAfter:
    """Tests for parse_retry_after function."""

    def test_seconds(self) -> None:
        """Test parsing an integer number of seconds."""
        assert parse_retry_after("120") == 120.0
        assert parse_retry_after("0") == 0.0
        assert parse_retry_after(" 3 ") == 3.0

    def test_negative_seconds_clamp_to_zero(self) -> None:
        assert parse_retry_after("-5") == 0.0

    def test_future_http_date(self) -> None:
        """Test that an HTTP-date yields the time left until it."""
        header = format_datetime(NOW + timedelta(seconds=90), usegmt=True)
        assert parse_retry_after(header, now=NOW) == 90.0

    def test_past_http_date_is_zero(self) -> None:
        """Test that a date already passed means retry immediately."""
        header = format_datetime(NOW - timedelta(minutes=10), usegmt=True)
        assert parse_retry_after(header, now=NOW) == 0.0

    def test_past_http_date_against_real_clock(self) -> None:
        assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") == 0.0

    def test_garbage_falls_back_to_default(self) -> None:
        """Test that unparseable values use the default delay."""
        assert parse_retry_after("garbage") == 5.0
        assert parse_retry_after("1.5") == 5.0
        assert parse_retry_after("garbage", default=2.0) == 2.0

    def test_missing_header_falls_back_to_default(self) -> None:
        assert parse_retry_after(None) == 5.0
        assert parse_retry_after("") == 5.0
        assert parse_retry_after(None, default=0.5) == 0.5
