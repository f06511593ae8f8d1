"""
OpenAI speech synthesis (fallback voice).

Raises VoiceSynthesisError on API errors or an empty payload.  Only used
when the primary synthesizer has already failed, so a failure here ends
the request.
"""

from __future__ import annotations

import openai
from openai import AsyncOpenAI

from roaster.core.settings import settings
from roaster.domain.errors import VoiceSynthesisError
from roaster.infra.providers.clients import get_openai_client


class OpenAISpeechSynthesizer:
    name = "openai"

    def __init__(self, client: AsyncOpenAI | None = None) -> None:
        self._client = client

    async def synthesize(self, text: str, voice: str) -> bytes:
        if self._client is None and not settings.openai_api_key:
            raise VoiceSynthesisError(self.name, "OPENAI_API_KEY not configured")
        client = self._client or get_openai_client()
        try:
            resp = await client.audio.speech.create(
                model=settings.openai_tts_model,
                voice=voice,
                input=text,
                response_format="mp3",
            )
        except openai.OpenAIError as e:
            raise VoiceSynthesisError(self.name, str(e)) from e

        audio = resp.content
        if not audio:
            raise VoiceSynthesisError(self.name, "empty audio payload")
        return audio
