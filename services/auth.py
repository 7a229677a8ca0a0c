from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from config import settings

_ALGO = "HS256"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


def create_token(user_id: str, email: str, ttl_minutes: int | None = None) -> str:
    ttl = ttl_minutes if ttl_minutes is not None else settings.session_ttl_minutes
    exp = datetime.now(timezone.utc) + timedelta(minutes=ttl)
    payload = {"sub": user_id, "email": email, "exp": exp}
    return jwt.encode(payload, settings.jwt_secret, algorithm=_ALGO)


def verify_token(token: str) -> dict:
    """Decoded claims; raises jwt.InvalidTokenError (expired, forged, garbage)."""
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[_ALGO])
    if not payload.get("sub"):
        raise jwt.InvalidTokenError("token has no subject")
    return payload
