# api/routes/exercises.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import CurrentUser, get_current_user
from api.routes.schemas import ExerciseOut
from core.forms import exercise_form
from services.db import Exercise, get_session

_LOG = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[ExerciseOut],
    summary="List the caller's exercises, most recently performed first",
)
async def list_exercises(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> list[ExerciseOut]:
    try:
        result = await db.execute(
            select(Exercise)
            .where(Exercise.user_id == user.id)
            .order_by(Exercise.exercise_time.desc())
        )
        rows = result.scalars().all()
    except SQLAlchemyError:
        _LOG.exception("listing exercises failed (user=%s)", user.id)
        raise HTTPException(500, "Error fetching exercises")
    return [ExerciseOut.model_validate(e) for e in rows]


@router.post(
    "",
    response_model=ExerciseOut,
    status_code=status.HTTP_201_CREATED,
    summary="Log an exercise; only the chosen category's fields are kept",
)
async def create_exercise(
    payload: dict[str, Any] = Body(...),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ExerciseOut:
    try:
        body = exercise_form.validate_python(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(), body=payload)

    exercise = Exercise(**body.to_row(), user_id=user.id)
    try:
        db.add(exercise)
        await db.commit()
        await db.refresh(exercise)
    except SQLAlchemyError:
        _LOG.exception("adding exercise failed (user=%s)", user.id)
        await db.rollback()
        raise HTTPException(500, "Error creating exercise")
    return ExerciseOut.model_validate(exercise)


@router.delete(
    "",
    summary="Delete one of the caller's exercises",
)
async def delete_exercise(
    id: str | None = Query(None),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> dict[str, bool]:
    if not id:
        raise HTTPException(400, "Exercise ID is required")

    try:
        exercise = await db.get(Exercise, id)
        if exercise is None:
            raise HTTPException(404, "Exercise not found")
        if exercise.user_id != user.id:
            raise HTTPException(403, "Unauthorized to delete this exercise")
        await db.delete(exercise)
        await db.commit()
    except SQLAlchemyError:
        _LOG.exception("deleting exercise %s failed (user=%s)", id, user.id)
        await db.rollback()
        raise HTTPException(500, "Error deleting exercise")
    return {"success": True}
