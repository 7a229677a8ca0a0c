# api/routes/auth.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.routes.schemas import Credentials, SessionOut
from config import settings
from services.auth import check_password, create_token, hash_password
from services.db import Account, get_session

_LOG = logging.getLogger(__name__)

router = APIRouter()


def _start_session(response: Response, account: Account) -> SessionOut:
    token = create_token(account.id, account.email)
    response.set_cookie(
        settings.session_cookie,
        token,
        max_age=settings.session_ttl_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.site_url.startswith("https"),
    )
    return SessionOut(
        user_id=account.id,
        email=account.email,
        access_token=token,
        redirectTo=f"{settings.site_url}/dashboard",
    )


@router.post("/signup", response_model=SessionOut, status_code=status.HTTP_201_CREATED)
async def sign_up(
    body: Credentials,
    response: Response,
    db: AsyncSession = Depends(get_session),
) -> SessionOut:
    email = body.email.lower()
    account = Account(email=email, password_hash=hash_password(body.password))
    db.add(account)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(409, "An account with this email already exists")
    _LOG.info("new account %s", account.id)
    return _start_session(response, account)


@router.post("/signin", response_model=SessionOut)
async def sign_in(
    body: Credentials,
    response: Response,
    db: AsyncSession = Depends(get_session),
) -> SessionOut:
    account = (
        await db.execute(select(Account).where(Account.email == body.email.lower()))
    ).scalar_one_or_none()
    if account is None or not check_password(body.password, account.password_hash):
        raise HTTPException(401, "Invalid email or password")
    return _start_session(response, account)


@router.post("/signout")
async def sign_out(response: Response) -> dict[str, bool]:
    response.delete_cookie(settings.session_cookie)
    return {"success": True}
