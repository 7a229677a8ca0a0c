"""
Dashboard aggregation over in-memory rows (no DB).
Reference zone America/New_York, weeks start on Sunday.
"""
from __future__ import annotations

from datetime import datetime, timezone

from core.dashboard import Dashboard, active_days, daily_calories, weight_progress
from services.db import Exercise, Meal, Profile

UTC = timezone.utc
NOW = datetime(2026, 10, 19, 16, 0, tzinfo=UTC)        # Mon Oct 19, noon EDT


def _meal(cal, ts):
    return Meal(name="m", calories=cal, meal_time=ts)


def _ex(ts):
    return Exercise(name="e", type="Running", exercise_category="cardio", exercise_time=ts)


# ── daily calories ───────────────────────────────────────────────────
def test_daily_calories_counts_only_today():
    meals = [
        _meal(300, datetime(2026, 10, 19, 5, 0, tzinfo=UTC)),     # 01:00 today
        _meal(500, datetime(2026, 10, 19, 3, 30, tzinfo=UTC)),    # 23:30 yesterday
        _meal(200, datetime(2026, 10, 20, 3, 59, tzinfo=UTC)),    # 23:59 today
        _meal(None, datetime(2026, 10, 19, 14, 0, tzinfo=UTC)),   # missing → 0
        _meal(1000, datetime(2026, 10, 20, 4, 0, tzinfo=UTC)),    # midnight → tomorrow
    ]
    assert daily_calories(meals, NOW) == 500


def test_daily_calories_accepts_naive_utc():
    assert daily_calories([_meal(250, datetime(2026, 10, 19, 15, 0))], NOW) == 250


def test_daily_calories_empty():
    assert daily_calories([], NOW) == 0


# ── active days ──────────────────────────────────────────────────────
def test_active_days_dedupes_by_local_date():
    exercises = [
        _ex(datetime(2026, 10, 18, 14, 0, tzinfo=UTC)),   # Sun
        _ex(datetime(2026, 10, 18, 20, 0, tzinfo=UTC)),   # Sun again
        _ex(datetime(2026, 10, 19, 3, 30, tzinfo=UTC)),   # still Sun in New York
        _ex(datetime(2026, 10, 20, 12, 0, tzinfo=UTC)),   # Tue
        _ex(datetime(2026, 10, 17, 12, 0, tzinfo=UTC)),   # Sat, previous week
        _ex(datetime(2026, 10, 25, 5, 0, tzinfo=UTC)),    # next week
    ]
    assert active_days(exercises, NOW) == 2


# ── weight progress ──────────────────────────────────────────────────
def test_weight_progress_not_set():
    assert weight_progress(None) == ("Not set", "Not set")
    assert weight_progress(Profile(weight=82.5, goal_weight=None)) == ("82.5 kg", "Not set")


def test_stat_cards():
    d = Dashboard(daily_calories=1250, calorie_goal=2300, active_days=3,
                  current_weight="80 kg", goal_weight="75 kg")
    cards = {c["name"]: c for c in d.stats()}
    assert cards["Daily Calories"] == {"name": "Daily Calories", "value": "1250", "target": "2,300"}
    assert cards["Active Days"]["value"] == "3/7"
    assert cards["Current Weight"]["target"] == "75 kg"
