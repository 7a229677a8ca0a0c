# services/gemini.py
import logging
from typing import Callable

import httpx
from google import genai
from google.genai import types, errors as gerrors

from config import settings

_LOG = logging.getLogger(__name__)

Generator = Callable[[str], str]


class GenerationError(RuntimeError):
    """The text-generation API could not produce an answer."""


# ───────────── Client (lazy) ─────────────
_client: genai.Client | None = None


def _get_client() -> genai.Client:
    global _client
    if _client is None:
        if not settings.gemini_api_key:
            raise GenerationError("GEMINI_API_KEY not set in environment")
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


# ───────────── Generation (sync, no retry) ─────────────
def generate(
    prompt: str,
    temperature: float = 0.7,
    max_output_tokens: int = 1000,
) -> str:
    """Run a completion and return the LLM’s text response."""
    try:
        resp = _get_client().models.generate_content(
            model=settings.gemini_model,
            contents=[prompt],
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
        )
    except gerrors.APIError as e:
        _LOG.error("Gemini generation failed: %s", e)
        raise GenerationError(f"Gemini API error: {e.code}") from e
    except httpx.HTTPError as e:
        _LOG.error("Gemini unreachable: %r", e)
        raise GenerationError("Gemini API unreachable") from e

    text = resp.text
    if not text:
        raise GenerationError("Gemini returned an empty answer")
    return text


def get_generator() -> Generator:
    """FastAPI dependency; tests swap in a fake."""
    return generate
