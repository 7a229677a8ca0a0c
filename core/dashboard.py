"""
core/dashboard.py
────────────────────────────────────────────────────────────────────────
Dashboard statistics, recomputed on every page load:

1. daily calories   – Σ calories of meals eaten today
2. active days      – distinct dates with an exercise this week
3. weight progress  – current / goal weight straight off the profile

The pure helpers work on rows already in memory; `build_dashboard()`
does the loading and applies the failure policy (a failed read is
logged and its statistic falls back to zero / "Not set").
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.dates import as_utc, day_bounds, now_utc, to_reference_time, week_bounds
from core.forms import DEFAULT_CALORIE_GOAL
from services.db import Exercise, Meal, Profile

_LOG = logging.getLogger(__name__)

NOT_SET = "Not set"
RECENT_LIMIT = 5


@dataclass
class Dashboard:
    daily_calories: float = 0
    calorie_goal: int = DEFAULT_CALORIE_GOAL
    current_weight: str = NOT_SET
    goal_weight: str = NOT_SET
    active_days: int = 0
    recent_meals: list[Meal] = field(default_factory=list)
    recent_exercises: list[Exercise] = field(default_factory=list)

    def stats(self) -> list[dict[str, str]]:
        """The three stat cards, already formatted for display."""
        return [
            {
                "name": "Daily Calories",
                "value": _num(self.daily_calories),
                "target": f"{self.calorie_goal:,}",
            },
            {
                "name": "Current Weight",
                "value": self.current_weight,
                "target": self.goal_weight,
            },
            {
                "name": "Active Days",
                "value": f"{self.active_days}/7",
                "target": "7/7",
            },
        ]


# ───────────────────────────── pure ───────────────────────────────── #
def _num(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(round(value, 1))


def _within(ts: datetime, bounds: tuple[datetime, datetime]) -> bool:
    start, end = bounds
    return start <= as_utc(ts) < end


def daily_calories(meals: Iterable[Meal], now: datetime | None = None) -> float:
    bounds = day_bounds(now)
    return sum(
        (m.calories or 0) for m in meals if m.meal_time and _within(m.meal_time, bounds)
    )


def active_days(exercises: Iterable[Exercise], now: datetime | None = None) -> int:
    bounds = week_bounds(now)
    dates = {
        to_reference_time(e.exercise_time).date().isoformat()
        for e in exercises
        if e.exercise_time and _within(e.exercise_time, bounds)
    }
    return len(dates)


def _kg(value: float | None) -> str:
    return f"{_num(value)} kg" if value else NOT_SET


def weight_progress(profile: Profile | None) -> tuple[str, str]:
    if profile is None:
        return NOT_SET, NOT_SET
    return _kg(profile.weight), _kg(profile.goal_weight)


# ──────────────────────────── loading ─────────────────────────────── #
async def _failed(db: AsyncSession, what: str, user_id: str) -> None:
    _LOG.exception(what, user_id)
    await db.rollback()


async def _rows(db: AsyncSession, stmt) -> Sequence:
    return (await db.execute(stmt)).scalars().all()


async def build_dashboard(
    db: AsyncSession,
    user_id: str,
    now: datetime | None = None,
) -> Dashboard:
    now = now or now_utc()
    out = Dashboard()

    try:
        profile = await db.get(Profile, user_id)
        out.current_weight, out.goal_weight = weight_progress(profile)
        if profile and profile.daily_calorie_goal:
            out.calorie_goal = profile.daily_calorie_goal
    except SQLAlchemyError:
        await _failed(db, "dashboard: profile read failed (user=%s)", user_id)

    try:
        start, end = day_bounds(now)
        meals = await _rows(
            db,
            select(Meal).where(
                Meal.user_id == user_id, Meal.meal_time >= start, Meal.meal_time < end
            ),
        )
        out.daily_calories = daily_calories(meals, now)
    except SQLAlchemyError:
        await _failed(db, "dashboard: today's meals read failed (user=%s)", user_id)

    try:
        start, end = week_bounds(now)
        exercises = await _rows(
            db,
            select(Exercise).where(
                Exercise.user_id == user_id,
                Exercise.exercise_time >= start,
                Exercise.exercise_time < end,
            ),
        )
        out.active_days = active_days(exercises, now)
    except SQLAlchemyError:
        await _failed(db, "dashboard: week's exercises read failed (user=%s)", user_id)

    try:
        out.recent_meals = list(await _rows(
            db,
            select(Meal)
            .where(Meal.user_id == user_id)
            .order_by(Meal.created_at.desc())
            .limit(RECENT_LIMIT),
        ))
        out.recent_exercises = list(await _rows(
            db,
            select(Exercise)
            .where(Exercise.user_id == user_id)
            .order_by(Exercise.created_at.desc())
            .limit(RECENT_LIMIT),
        ))
    except SQLAlchemyError:
        await _failed(db, "dashboard: recent activity read failed (user=%s)", user_id)

    return out
