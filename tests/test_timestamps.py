"""Unit tests for timestamp parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from freshbooks_classic.exceptions import DecodeError, TimestampParseError
from freshbooks_classic.timestamps import parse_timestamp


class TestParseTimestamp:
    """Tests for parse_timestamp()."""

    def test_primary_layout(self):
        """Service layout parses to a naive datetime."""
        assert parse_timestamp("2023-05-01 12:00:00") == datetime(2023, 5, 1, 12, 0, 0)

    def test_fallback_rfc3339_utc(self):
        """RFC 3339 with Z falls back to the ISO parser and keeps UTC."""
        result = parse_timestamp("2023-05-01T12:00:00Z")
        assert result == datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_fallback_with_offset(self):
        result = parse_timestamp("2023-05-01T12:00:00-04:00")
        assert result.utcoffset() == timedelta(hours=-4)
        assert result.hour == 12

    def test_fallback_fractional_seconds(self):
        result = parse_timestamp("2023-05-01T12:00:00.250000+00:00")
        assert result.microsecond == 250000

    def test_surrounding_whitespace_ignored(self):
        assert parse_timestamp("  2023-05-01 12:00:00\n") == datetime(2023, 5, 1, 12)

    @pytest.mark.parametrize("text", ["not a date", "2023-13-45 99:00:00", "01/05/2023", ""])
    def test_unparseable_raises(self, text):
        """Text matching neither layout raises TimestampParseError."""
        with pytest.raises(TimestampParseError) as exc_info:
            parse_timestamp(text)

        assert exc_info.value.text == text.strip()

    def test_parse_error_is_decode_error(self):
        with pytest.raises(DecodeError):
            parse_timestamp("yesterday")
