# tests/test_dates.py
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.dates import (
    as_utc,
    current_reference_input,
    day_bounds,
    format_datetime,
    parse_local_input,
    week_bounds,
)

UTC = timezone.utc


def test_as_utc_treats_naive_as_utc():
    assert as_utc(datetime(2026, 1, 1, 12)) == datetime(2026, 1, 1, 12, tzinfo=UTC)


def test_parse_local_input_uses_reference_wall_clock():
    # EST in winter, EDT in summer
    assert parse_local_input("2026-01-15T08:30") == datetime(2026, 1, 15, 13, 30, tzinfo=UTC)
    assert parse_local_input("2026-07-15T08:30") == datetime(2026, 7, 15, 12, 30, tzinfo=UTC)


def test_parse_local_input_keeps_explicit_offset():
    assert parse_local_input("2026-07-15T08:30:00Z") == datetime(2026, 7, 15, 8, 30, tzinfo=UTC)
    assert parse_local_input("2026-07-15T08:30:00+02:00") == datetime(2026, 7, 15, 6, 30, tzinfo=UTC)


def test_parse_local_input_rejects_garbage():
    with pytest.raises(ValueError):
        parse_local_input("yesterday-ish")


def test_format_datetime_medium_short():
    ts = datetime(2026, 10, 19, 19, 4, tzinfo=UTC)
    assert format_datetime(ts) == "Oct 19, 2026, 3:04 PM"
    assert format_datetime("2026-10-19T04:05:00+00:00") == "Oct 19, 2026, 12:05 AM"


def test_current_reference_input_format():
    now = datetime(2026, 10, 19, 3, 7, tzinfo=UTC)      # 23:07 the evening before
    assert current_reference_input(now) == "2026-10-18T23:07"


# ── boundaries ───────────────────────────────────────────────────────
def test_day_bounds_follow_reference_zone():
    now = datetime(2026, 10, 19, 3, 0, tzinfo=UTC)      # still Oct 18 in New York
    start, end = day_bounds(now)
    assert start == datetime(2026, 10, 18, 4, 0, tzinfo=UTC)
    assert end == datetime(2026, 10, 19, 4, 0, tzinfo=UTC)


def test_day_bounds_on_dst_change_day():
    now = datetime(2026, 11, 1, 16, 0, tzinfo=UTC)      # clocks fall back that morning
    start, end = day_bounds(now)
    assert start == datetime(2026, 11, 1, 4, 0, tzinfo=UTC)
    assert end == datetime(2026, 11, 2, 5, 0, tzinfo=UTC)


def test_week_starts_on_sunday():
    now = datetime(2026, 10, 21, 16, 0, tzinfo=UTC)     # Wednesday
    start, end = week_bounds(now)
    assert start == datetime(2026, 10, 18, 4, 0, tzinfo=UTC)
    assert end == datetime(2026, 10, 25, 4, 0, tzinfo=UTC)
