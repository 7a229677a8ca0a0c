# api/deps.py
"""Per-request dependencies: who is calling, read from the session."""
from __future__ import annotations

from dataclasses import dataclass

import jwt
from fastapi import HTTPException, Request, status

from config import settings
from services.auth import verify_token


@dataclass(frozen=True)
class CurrentUser:
    id: str
    email: str


def session_token(request: Request) -> str | None:
    """Session cookie first, then `Authorization: Bearer …`."""
    token = request.cookies.get(settings.session_cookie)
    if token:
        return token
    scheme, _, value = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and value:
        return value.strip()
    return None


def optional_user(request: Request) -> CurrentUser | None:
    token = session_token(request)
    if not token:
        return None
    try:
        claims = verify_token(token)
    except jwt.InvalidTokenError:
        return None
    return CurrentUser(id=claims["sub"], email=claims.get("email", ""))


def get_current_user(request: Request) -> CurrentUser:
    user = optional_user(request)
    if user is None:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Unauthorized")
    return user
