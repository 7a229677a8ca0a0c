# api/routes/pages.py
"""
View models for the browser pages. The gate in `api.gate` has already
bounced anonymous visitors off the protected ones.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import CurrentUser, get_current_user
from api.routes.dashboard import render_dashboard
from api.routes.schemas import ExerciseOut, MealOut, ProfileOut
from config import settings
from core.dashboard import build_dashboard
from core.dates import current_reference_input, format_datetime
from core.forms import ACTIVITY_LEVELS, CATEGORIES, EXERCISE_TYPES, ProfileForm
from services.db import Exercise, Meal, Profile, get_session

_LOG = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])


@router.get("/")
def landing() -> dict[str, Any]:
    return {
        "title": "Fitness Tracker",
        "links": ["/dashboard", "/diet", "/exercise", "/profile"],
    }


@router.get("/dashboard")
async def dashboard_page(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> dict[str, Any]:
    view = render_dashboard(await build_dashboard(db, user.id)).model_dump(mode="json")
    for m in view["recent_meals"]:
        m["meal_time_display"] = format_datetime(m["meal_time"])
    for e in view["recent_exercises"]:
        e["exercise_time_display"] = format_datetime(e["exercise_time"])
    return view


@router.get("/diet")
async def diet_page(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> dict[str, Any]:
    error = None
    meals: list[dict[str, Any]] = []
    try:
        rows = (
            await db.execute(
                select(Meal).where(Meal.user_id == user.id).order_by(Meal.meal_time.desc())
            )
        ).scalars().all()
        for row in rows:
            item = MealOut.model_validate(row).model_dump(mode="json")
            item["meal_time_display"] = format_datetime(row.meal_time)
            meals.append(item)
    except SQLAlchemyError:
        _LOG.exception("diet page: meals read failed (user=%s)", user.id)
        error = "Failed to fetch meals"
    return {"meals": meals, "default_time": current_reference_input(), "error": error}


@router.get("/exercise")
async def exercise_page(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> dict[str, Any]:
    error = None
    exercises: list[dict[str, Any]] = []
    try:
        rows = (
            await db.execute(
                select(Exercise)
                .where(Exercise.user_id == user.id)
                .order_by(Exercise.exercise_time.desc())
            )
        ).scalars().all()
        for row in rows:
            item = ExerciseOut.model_validate(row).model_dump(mode="json")
            item["exercise_time_display"] = format_datetime(row.exercise_time)
            exercises.append(item)
    except SQLAlchemyError:
        _LOG.exception("exercise page: exercises read failed (user=%s)", user.id)
        error = "Failed to fetch exercises"
    return {
        "exercises": exercises,
        "categories": list(CATEGORIES),
        "types": EXERCISE_TYPES,
        "default_category": "cardio",
        "default_time": current_reference_input(),
        "error": error,
    }


@router.get("/profile")
async def profile_page(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> dict[str, Any]:
    try:
        profile = await db.get(Profile, user.id)
    except SQLAlchemyError:
        _LOG.exception("profile page: read failed (user=%s)", user.id)
        raise HTTPException(500, "Failed to load profile data")
    if profile is None:
        data = {"id": user.id, "email": user.email, **ProfileForm().to_row()}
    else:
        data = ProfileOut.model_validate(profile).model_dump(mode="json")
    return {"profile": data, "activity_levels": list(ACTIVITY_LEVELS)}


# ───────────────────────── auth pages ───────────────────────
@router.get("/auth/signin")
def signin_page() -> dict[str, Any]:
    return {
        "signin": "/auth/signin",
        "signup": "/auth/signup",
        "redirectTo": f"{settings.site_url}/dashboard",
    }


@router.get("/auth/verify-email")
def verify_email_page() -> dict[str, str]:
    return {
        "message": "Check your email for a confirmation link, then sign in to continue.",
    }
