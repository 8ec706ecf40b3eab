"""Tests for feed date parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from outage_feed.services.feed_dates import format_instant, parse_feed_date

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("ms", [0, 1, 1_771_718_700_000, 1_771_718_700_123, -86_400_000])
def test_epoch_millis(ms):
    assert parse_feed_date(ms) == EPOCH + timedelta(milliseconds=ms)


def test_wrapped_epoch_matches_numeric():
    assert parse_feed_date("/Date(1771718700000)/") == parse_feed_date(1771718700000)
    assert parse_feed_date("/Date(1771718700000)/") == datetime(2026, 2, 22, 0, 5, tzinfo=timezone.utc)


def test_wrapped_epoch_negative_and_offset():
    assert parse_feed_date("/Date(-1000)/") == EPOCH - timedelta(seconds=1)
    # the offset suffix is informational; the integer is UTC
    assert parse_feed_date("/Date(1771718700000+1100)/") == parse_feed_date(1771718700000)


def test_iso_strings():
    assert parse_feed_date("2026-03-01T08:00:00Z") == datetime(2026, 3, 1, 8, tzinfo=timezone.utc)
    assert parse_feed_date("2026-03-01T19:00:00+11:00") == datetime(2026, 3, 1, 8, tzinfo=timezone.utc)
    assert parse_feed_date("2026-03-01T08:00:00.250Z") == datetime(
        2026, 3, 1, 8, 0, 0, 250000, tzinfo=timezone.utc
    )


def test_naive_iso_taken_as_utc():
    assert parse_feed_date("2026-03-01T08:00:00") == datetime(2026, 3, 1, 8, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "val",
    [
        None, "not a date", "", "   ", "/Date(abc)/", float("nan"), float("inf"), 10**20, True, [], {},
        # valid ISO, but the UTC conversion falls outside the datetime range
        "0001-01-01T00:00:00+01:00", "9999-12-31T23:59:59-01:00",
    ],
)
def test_unparsable_is_absent(val):
    assert parse_feed_date(val) is None


def test_format_instant():
    dt = datetime(2026, 2, 22, 0, 5, 0, 123456, tzinfo=timezone.utc)
    assert format_instant(dt) == "2026-02-22T00:05:00.123Z"
    aest = timezone(timedelta(hours=10))
    assert format_instant(datetime(2026, 2, 22, 10, 5, tzinfo=aest)) == "2026-02-22T00:05:00.000Z"
