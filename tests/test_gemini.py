# tests/test_gemini.py
from __future__ import annotations

from types import SimpleNamespace

import httpx
import pytest
from google.genai import errors as gerrors

from services import gemini


class _Models:
    def __init__(self, result=None, error=None):
        self.result, self.error = result, error

    def generate_content(self, **_):
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_client(monkeypatch):
    def _install(**kw):
        monkeypatch.setattr(gemini, "_client", SimpleNamespace(models=_Models(**kw)))
    return _install


def test_returns_text(fake_client):
    fake_client(result=SimpleNamespace(text="Warm-up: ..."))
    assert gemini.generate("prompt") == "Warm-up: ..."


def test_api_error_becomes_generation_error(fake_client):
    fake_client(error=gerrors.APIError(500, {"error": {"message": "boom", "status": "INTERNAL"}}))
    with pytest.raises(gemini.GenerationError):
        gemini.generate("prompt")


def test_empty_answer_is_an_error(fake_client):
    fake_client(result=SimpleNamespace(text=""))
    with pytest.raises(gemini.GenerationError):
        gemini.generate("prompt")


def test_missing_key(monkeypatch):
    monkeypatch.setattr(gemini, "_client", None)
    monkeypatch.setattr(gemini.settings, "gemini_api_key", None)
    with pytest.raises(gemini.GenerationError):
        gemini.generate("prompt")


@pytest.mark.parametrize(
    "error",
    [httpx.ConnectTimeout("timed out"), httpx.ConnectError("refused"), httpx.ReadTimeout("slow")],
)
def test_transport_failure_becomes_generation_error(fake_client, error):
    fake_client(error=error)
    with pytest.raises(gemini.GenerationError):
        gemini.generate("prompt")
