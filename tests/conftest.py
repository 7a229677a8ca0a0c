# tests/conftest.py
from __future__ import annotations

import asyncio
from typing import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from main import app
from services.auth import create_token
from services.db import get_session, init_models, session_factory
from services.gemini import get_generator

USER_A = ("user-a", "a@example.com")
USER_B = ("user-b", "b@example.com")


def auth_headers(user: tuple[str, str] = USER_A) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_token(*user)}"}


class FakeGenerator:
    """Stands in for services.gemini.generate; records every prompt."""

    def __init__(self, answer: str = "PLAN", error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def db_engine(tmp_path) -> AsyncEngine:
    # NullPool: no connection outlives the event loop that opened it
    eng = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool
    )
    asyncio.run(init_models(eng))
    yield eng
    asyncio.run(eng.dispose())


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def client(db_engine, generator) -> TestClient:
    factory = session_factory(db_engine)

    async def _session():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_session] = _session
    app.dependency_overrides[get_generator] = lambda: generator
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_session() -> Callable:
    """Swap the request session for an arbitrary async generator."""
    def _use(dep) -> None:
        app.dependency_overrides[get_session] = dep
    return _use
