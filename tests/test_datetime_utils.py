from datetime import datetime, timedelta, timezone

from app.utils.datetime_utils import as_utc, to_iso_string, truncate_to_milliseconds, utc_now


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo == timezone.utc


def test_as_utc_treats_naive_as_utc():
    naive = datetime(2024, 12, 28, 10, 30)
    assert as_utc(naive) == datetime(2024, 12, 28, 10, 30, tzinfo=timezone.utc)


def test_as_utc_converts_other_offsets():
    plus_two = datetime(2024, 12, 28, 12, 30, tzinfo=timezone(timedelta(hours=2)))
    assert as_utc(plus_two) == datetime(2024, 12, 28, 10, 30, tzinfo=timezone.utc)


def test_to_iso_string_uses_milliseconds_and_z_suffix():
    dt = datetime(2024, 12, 28, 10, 30, 0, 123456, tzinfo=timezone.utc)
    assert to_iso_string(dt) == "2024-12-28T10:30:00.123Z"


def test_truncate_to_milliseconds_matches_stored_precision():
    dt = datetime(2024, 12, 28, 10, 30, 0, 123456, tzinfo=timezone.utc)

    truncated = truncate_to_milliseconds(dt)

    assert truncated == datetime(2024, 12, 28, 10, 30, 0, 123000, tzinfo=timezone.utc)
    assert to_iso_string(truncated) == to_iso_string(dt)
