from __future__ import annotations
from pydantic import BaseModel

from .exercise import ExerciseOut
from .meal import MealOut


class StatCard(BaseModel):
    name: str
    value: str
    target: str


class DashboardOut(BaseModel):
    daily_calories: float
    calorie_goal: int
    current_weight: str
    goal_weight: str
    active_days: int
    stats: list[StatCard]
    recent_meals: list[MealOut]
    recent_exercises: list[ExerciseOut]
