"""Tests for time utilities."""

from datetime import datetime, timedelta, timezone

from resource_hub.utils.time import to_utc, to_utc_string


def test_to_utc_string_whole_seconds():
    dt = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert to_utc_string(dt) == "2020-01-02 03:04:05 +0000 UTC"


def test_to_utc_string_trims_fraction_zeros():
    dt = datetime(2020, 2, 1, 12, 30, 5, 250000, tzinfo=timezone.utc)
    assert to_utc_string(dt) == "2020-02-01 12:30:05.25 +0000 UTC"


def test_to_utc_string_converts_offsets_to_utc():
    dt = datetime(2020, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
    assert to_utc_string(dt) == "2020-01-02 03:04:05 +0000 UTC"


def test_naive_datetime_is_treated_as_utc():
    naive = datetime(2020, 1, 2, 3, 4, 5)
    assert to_utc(naive).tzinfo == timezone.utc
    assert to_utc_string(naive) == "2020-01-02 03:04:05 +0000 UTC"
