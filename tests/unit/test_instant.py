from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from gamelink.domain.value_objects.instant import parse_instant


def test_aware_datetime_is_returned_unchanged():
    ts = datetime(2025, 3, 1, 12, tzinfo=timezone(timedelta(hours=2)))
    assert parse_instant(ts) == ts


def test_naive_datetime_is_taken_as_utc():
    assert parse_instant(datetime(2025, 3, 1, 12)) == datetime(2025, 3, 1, 12, tzinfo=timezone.utc)


def test_iso_string_with_z_suffix():
    assert parse_instant("2025-03-01T12:00:00Z") == datetime(2025, 3, 1, 12, tzinfo=timezone.utc)


def test_offsets_compare_as_instants():
    assert parse_instant("2025-03-01T12:00:00+02:00") < parse_instant("2025-03-01T11:00:00Z")


@pytest.mark.parametrize("value", [None, "", "   ", "yesterday", 1700000000, object()])
def test_invalid_values_yield_none(value):
    assert parse_instant(value) is None
