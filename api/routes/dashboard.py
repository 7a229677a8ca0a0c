# api/routes/dashboard.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import CurrentUser, get_current_user
from api.routes.schemas import DashboardOut, ExerciseOut, MealOut
from core.dashboard import Dashboard, build_dashboard
from services.db import get_session

router = APIRouter()


def render_dashboard(d: Dashboard) -> DashboardOut:
    return DashboardOut(
        daily_calories=d.daily_calories,
        calorie_goal=d.calorie_goal,
        current_weight=d.current_weight,
        goal_weight=d.goal_weight,
        active_days=d.active_days,
        stats=d.stats(),
        recent_meals=[MealOut.model_validate(m) for m in d.recent_meals],
        recent_exercises=[ExerciseOut.model_validate(e) for e in d.recent_exercises],
    )


@router.get("", response_model=DashboardOut, summary="Today's and this week's stats")
async def dashboard(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> DashboardOut:
    # never fails on missing data: build_dashboard falls back per statistic
    return render_dashboard(await build_dashboard(db, user.id))
