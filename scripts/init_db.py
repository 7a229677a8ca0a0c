"""
Create every table the app needs (idempotent).

Usage
-----

    python -m scripts.init_db
"""
from __future__ import annotations

import asyncio

from config import settings
from services.db import engine, init_models


async def _run() -> None:
    await init_models()
    await engine().dispose()
    print(f"✓ schema ready on {settings.database_url.split('@')[-1]}")


if __name__ == "__main__":
    asyncio.run(_run())
