# api/routes/meta.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from services.db import get_session

_LOG = logging.getLogger(__name__)

router = APIRouter()


@router.get("/test-connection")
async def test_connection(db: AsyncSession = Depends(get_session)):
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        _LOG.exception("database connection check failed")
        return JSONResponse({"status": "error"}, status_code=500)
    return {"status": "Connected"}
