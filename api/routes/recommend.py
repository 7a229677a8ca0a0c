# api/routes/recommend.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from api.deps import CurrentUser, get_current_user
from core.workout_plan import (
    HISTORY_LIMIT,
    WorkoutRequest,
    WorkoutResponse,
    build_prompt,
    summarize_history,
)
from services.db import Exercise, WorkoutRecommendation, get_session
from services.gemini import GenerationError, Generator, get_generator

_LOG = logging.getLogger(__name__)

router = APIRouter()


async def _recent_history(db: AsyncSession, user_id: str) -> list[dict] | None:
    try:
        rows = (
            await db.execute(
                select(Exercise)
                .where(Exercise.user_id == user_id)
                .order_by(Exercise.exercise_time.desc())
                .limit(HISTORY_LIMIT)
            )
        ).scalars().all()
    except SQLAlchemyError:
        _LOG.exception("exercise history unavailable (user=%s)", user_id)
        await db.rollback()
        return None
    return summarize_history(rows)


async def _store(db: AsyncSession, user_id: str, req: WorkoutRequest, text: str) -> None:
    """Best-effort log of the request/answer pair; never fails the response."""
    try:
        db.add(
            WorkoutRecommendation(
                user_id=user_id,
                equipment=req.equipment or "",
                fitness_level=req.level,
                goals=req.goal_text,
                recommendation=text,
            )
        )
        await db.commit()
    except SQLAlchemyError as e:
        _LOG.warning("storing recommendation failed (user=%s): %s", user_id, e)
        await db.rollback()


@router.post("/recommend", response_model=WorkoutResponse)
async def recommend_workout(
    body: WorkoutRequest,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
    generate: Generator = Depends(get_generator),
) -> WorkoutResponse:
    if not body.equipment:
        raise HTTPException(400, "Equipment information is required")

    history = await _recent_history(db, user.id)
    prompt = build_prompt(body, history)

    try:
        # blocking SDK call; the request stays open until it returns
        workout = await run_in_threadpool(generate, prompt)
    except GenerationError:
        _LOG.exception("workout generation failed (user=%s)", user.id)
        raise HTTPException(
            503,
            "Unable to generate recommendation at the moment. Please try again later.",
        )
    except Exception:
        _LOG.exception("unexpected error generating workout (user=%s)", user.id)
        raise HTTPException(500, "Failed to generate workout recommendation")

    await _store(db, user.id, body, workout)
    return WorkoutResponse(workout=workout)
