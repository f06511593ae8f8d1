"""
Shared outbound clients.

One AsyncOpenAI client (chat + fallback speech) and one httpx.AsyncClient
(ElevenLabs), created lazily on first use and reused for the life of the
process.  main.py closes both on shutdown.
"""

from __future__ import annotations

import httpx
from openai import AsyncOpenAI

from roaster.core.settings import settings

_openai: AsyncOpenAI | None = None
_http: httpx.AsyncClient | None = None


def get_openai_client() -> AsyncOpenAI:
    global _openai
    if _openai is None:
        if not settings.openai_api_key:
            raise RuntimeError("OPENAI_API_KEY not configured")
        _openai = AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=float(settings.llm_timeout_seconds),
        )
    return _openai


def get_http_client() -> httpx.AsyncClient:
    global _http
    if _http is None:
        _http = httpx.AsyncClient(timeout=float(settings.tts_timeout_seconds))
    return _http


async def close_clients() -> None:
    global _openai, _http
    if _openai is not None:
        await _openai.close()
        _openai = None
    if _http is not None:
        await _http.aclose()
        _http = None
