# api/routes/meals.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import CurrentUser, get_current_user
from api.routes.schemas import MealOut
from core.forms import MealForm
from services.db import Meal, get_session

_LOG = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[MealOut],
    summary="List the caller's meals, most recently eaten first",
)
async def list_meals(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> list[MealOut]:
    try:
        result = await db.execute(
            select(Meal)
            .where(Meal.user_id == user.id)
            .order_by(Meal.meal_time.desc())
        )
        meals = result.scalars().all()
    except SQLAlchemyError:
        _LOG.exception("listing meals failed (user=%s)", user.id)
        raise HTTPException(500, "Failed to fetch meals")
    return [MealOut.model_validate(m) for m in meals]


@router.post(
    "",
    response_model=MealOut,
    status_code=status.HTTP_201_CREATED,
    summary="Log a meal for the caller",
)
async def create_meal(
    body: MealForm,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> MealOut:
    # owner always comes from the session, never from the body
    meal = Meal(**body.to_row(), user_id=user.id)
    try:
        db.add(meal)
        await db.commit()
        await db.refresh(meal)
    except SQLAlchemyError:
        _LOG.exception("adding meal failed (user=%s)", user.id)
        await db.rollback()
        raise HTTPException(500, "Failed to add meal")
    return MealOut.model_validate(meal)


@router.delete(
    "",
    summary="Delete one of the caller's meals",
)
async def delete_meal(
    id: str | None = Query(None),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> dict[str, bool]:
    if not id:
        raise HTTPException(400, "Meal ID is required")

    try:
        meal = await db.get(Meal, id)
        if meal is None:
            raise HTTPException(404, "Meal not found")
        if meal.user_id != user.id:
            raise HTTPException(403, "Unauthorized to delete this meal")
        await db.delete(meal)
        await db.commit()
    except SQLAlchemyError:
        _LOG.exception("deleting meal %s failed (user=%s)", id, user.id)
        await db.rollback()
        raise HTTPException(500, "Failed to delete meal")
    return {"success": True}
