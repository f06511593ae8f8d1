"""
Roast text generation via the OpenAI chat completions API.

Returns the stripped completion text, which may be empty.  The pipeline
decides what an empty reply means; API errors propagate unchanged.
"""

from __future__ import annotations

from openai import AsyncOpenAI

from roaster.core.logging import logger
from roaster.core.settings import settings
from roaster.infra.providers.clients import get_openai_client


class OpenAIRoastWriter:
    """Thin async wrapper around chat.completions for roast generation."""

    name = "openai"

    def __init__(self, client: AsyncOpenAI | None = None) -> None:
        self._client = client

    async def write(self, messages: list[dict]) -> str:
        client = self._client or get_openai_client()
        resp = await client.chat.completions.create(
            model=settings.openai_chat_model,
            messages=messages,
            temperature=settings.roast_temperature,
            top_p=settings.roast_top_p,
            presence_penalty=settings.roast_presence_penalty,
            frequency_penalty=settings.roast_frequency_penalty,
            max_tokens=settings.roast_max_tokens,
        )
        if not resp.choices:
            logger.warning("OpenAI chat returned no choices")
            return ""
        content = resp.choices[0].message.content
        return (content or "").strip()
