# api/routes/profile.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import CurrentUser, get_current_user
from api.routes.schemas import ProfileOut
from core.forms import ProfileForm
from services.db import Profile, get_session

_LOG = logging.getLogger(__name__)

router = APIRouter()

_UPSERT_DIALECTS = {"postgresql": postgresql.insert, "sqlite": sqlite.insert}


# ───────────────────────── helpers ──────────────────────────
async def upsert_profile(
    db: AsyncSession, user: CurrentUser, payload: dict[str, Any]
) -> Profile:
    """One profile per user: a single INSERT … ON CONFLICT DO UPDATE."""
    insert = _UPSERT_DIALECTS.get(db.get_bind().dialect.name)
    if insert is not None:
        stmt = insert(Profile).values(id=user.id, email=user.email, **payload)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Profile.id],
            set_={**payload, "email": user.email, "updated_at": func.now()},
        )
        await db.execute(stmt)
    else:
        # no native upsert: update → if row doesn’t exist we’ll insert
        res = await db.execute(
            update(Profile).where(Profile.id == user.id).values(**payload)
        )
        if res.rowcount == 0:
            db.add(Profile(id=user.id, email=user.email, **payload))
    await db.commit()
    return await db.get(Profile, user.id, populate_existing=True)


# ───────────────────────── read ─────────────────────────────
@router.get("", response_model=ProfileOut)
async def get_profile(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ProfileOut:
    try:
        profile = await db.get(Profile, user.id)
    except SQLAlchemyError:
        _LOG.exception("loading profile failed (user=%s)", user.id)
        raise HTTPException(500, "Failed to load profile data")
    if profile is None:
        raise HTTPException(404, "Profile not set")
    return ProfileOut.model_validate(profile)


# ───────────────────────── upsert ───────────────────────────
@router.put("", response_model=ProfileOut)
async def save_profile(
    body: ProfileForm,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ProfileOut:
    try:
        profile = await upsert_profile(db, user, body.to_row())
    except SQLAlchemyError:
        _LOG.exception("saving profile failed (user=%s)", user.id)
        await db.rollback()
        raise HTTPException(500, "Failed to update profile")
    return ProfileOut.model_validate(profile)
