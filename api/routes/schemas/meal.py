from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .common import UtcDatetime


class MealOut(BaseModel):
    id: str
    user_id: str
    name: str
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    meal_time: UtcDatetime
    created_at: UtcDatetime
    updated_at: UtcDatetime | None = None

    model_config = ConfigDict(from_attributes=True)
