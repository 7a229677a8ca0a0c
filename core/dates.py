"""
core/dates.py
────────────────────────────────────────────────────────────────────────
Wall-clock helpers for the single reference time zone
(`settings.reference_timezone`).

"Today" and "this week" are always computed in that zone, independent of
where the request came from; everything that leaves these helpers for the
store is an aware UTC instant.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from config import settings

LOCAL_INPUT_FORMAT = "%Y-%m-%dT%H:%M"      # <input type="datetime-local">


def reference_zone() -> ZoneInfo:
    return ZoneInfo(settings.reference_timezone)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Attach UTC to naive values (SQLite drops the offset on the way back)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_reference_time(dt: datetime) -> datetime:
    return as_utc(dt).astimezone(reference_zone())


def format_datetime(value: datetime | str) -> str:
    """Medium date + short time in the reference zone, e.g. `Oct 19, 2026, 3:04 PM`."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    local = to_reference_time(value)
    hour = local.hour % 12 or 12
    return (
        f"{local:%b} {local.day}, {local.year}, "
        f"{hour}:{local:%M} {'AM' if local.hour < 12 else 'PM'}"
    )


def current_reference_input(now: datetime | None = None) -> str:
    return to_reference_time(now or now_utc()).strftime(LOCAL_INPUT_FORMAT)


def parse_local_input(text: str) -> datetime:
    """
    Parse a form timestamp into an aware UTC instant.

    Naive text is reference-zone wall clock; text with an offset (or `Z`)
    keeps it. Raises ValueError on garbage.
    """
    text = text.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=reference_zone())
    return parsed.astimezone(timezone.utc)


# ──────────────────────────── boundaries ──────────────────────────── #
def _local_midnight(day) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=reference_zone())


def day_bounds(now: datetime | None = None) -> tuple[datetime, datetime]:
    """[start of today, start of tomorrow) as UTC instants."""
    today = to_reference_time(now or now_utc()).date()
    start = _local_midnight(today)
    end = _local_midnight(today + timedelta(days=1))
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)


def week_bounds(now: datetime | None = None) -> tuple[datetime, datetime]:
    """[start of week, start of next week) as UTC instants."""
    today = to_reference_time(now or now_utc()).date()
    offset = (today.weekday() - settings.week_starts_on) % 7
    first = today - timedelta(days=offset)
    start = _local_midnight(first)
    end = _local_midnight(first + timedelta(days=7))
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)
