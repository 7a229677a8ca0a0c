from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .common import UtcDatetime


class ExerciseOut(BaseModel):
    id: str
    user_id: str
    name: str
    type: str
    exercise_category: str
    duration: int | None = None
    calories_burned: int | None = None
    sets: int | None = None
    reps: int | None = None
    weight: float | None = None
    distance: float | None = None
    exercise_time: UtcDatetime
    created_at: UtcDatetime
    updated_at: UtcDatetime | None = None

    model_config = ConfigDict(from_attributes=True)
