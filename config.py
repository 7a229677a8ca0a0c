"""
Centralised settings loader.

Every key maps 1:1 to an upper-case environment variable (or a line in
`.env`), e.g. `database_url` ← DATABASE_URL.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime / DB ───────────────────────────────────────────────
    env_name: str = "local"
    database_url: str = "sqlite+aiosqlite:///./fitness.db"
    create_tables: bool = True
    log_level: str = "INFO"

    # ─── sessions ───────────────────────────────────────────────────
    jwt_secret: str = "changeme"
    session_ttl_minutes: int = 60 * 24 * 7
    session_cookie: str = "access_token"
    site_url: str = "http://localhost:8000"

    # ─── Gemini ─────────────────────────────────────────────────────
    gemini_api_key: str | None = None
    gemini_model: str = "models/gemini-2.0-flash"

    # ─── calendar ───────────────────────────────────────────────────
    reference_timezone: str = "America/New_York"
    week_starts_on: int = 6          # datetime.weekday(): 6 = Sunday

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
