from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .common import UtcDatetime


class ProfileOut(BaseModel):
    id: str
    email: str
    full_name: str | None = None
    avatar_url: str | None = None
    height: float | None = None
    weight: float | None = None
    goal_weight: float | None = None
    activity_level: str | None = None
    daily_calorie_goal: int | None = None
    created_at: UtcDatetime | None = None
    updated_at: UtcDatetime | None = None

    model_config = ConfigDict(from_attributes=True)
