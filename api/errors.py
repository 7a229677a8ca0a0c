# api/errors.py
"""Uniform `{"error": ...}` bodies for everything the API rejects."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

_LOG = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    # drop "body"/"query" and the union tag pydantic inserts for variants
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    if len(parts) > 1 and parts[0] in ("cardio", "strength", "flexibility", "sports"):
        parts = parts[1:]
    return ".".join(parts) or "body"


def validation_errors(errors: list[dict]) -> dict[str, str]:
    out: dict[str, str] = {}
    for err in errors:
        out.setdefault(_field_name(tuple(err.get("loc", ()))), str(err.get("msg", "invalid")))
    return out


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = validation_errors(exc.errors())
    name, msg = next(iter(fields.items()), ("body", "Invalid request"))
    _LOG.info("rejected %s %s: %s", request.method, request.url.path, fields)
    return JSONResponse({"error": f"{name}: {msg}", "fields": fields}, status_code=400)


def install(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
