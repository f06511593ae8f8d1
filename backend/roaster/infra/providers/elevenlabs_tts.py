"""
ElevenLabs text-to-speech (primary voice).

POST {base}/v1/text-to-speech/{voice_id} with the reply text and fixed
voice settings; the body of a 2xx response is MP3 audio.

Raises VoiceSynthesisError on a missing key, a transport error, a non-2xx
status, or a zero-length body.  The pipeline treats all of these the same
way: fall back.
"""

from __future__ import annotations

import httpx

from roaster.core.settings import settings
from roaster.domain.audio import AUDIO_MIME
from roaster.domain.errors import VoiceSynthesisError
from roaster.infra.providers.clients import get_http_client

# Provider error bodies can be large JSON blobs; keep log lines readable
_MAX_ERROR_TEXT = 300


class ElevenLabsSynthesizer:
    name = "elevenlabs"

    def __init__(
        self,
        http: httpx.AsyncClient | None = None,
        api_key: str | None = None,
    ) -> None:
        self._http = http
        self._api_key = api_key

    def _voice_settings(self) -> dict:
        return {
            "stability": settings.voice_stability,
            "similarity_boost": settings.voice_similarity_boost,
            "style": settings.voice_style,
        }

    async def synthesize(self, text: str, voice: str) -> bytes:
        api_key = self._api_key if self._api_key is not None else settings.elevenlabs_api_key
        if not api_key:
            raise VoiceSynthesisError(self.name, "ELEVENLABS_API_KEY not configured")

        url = f"{settings.elevenlabs_base_url.rstrip('/')}/v1/text-to-speech/{voice}"
        body: dict = {"text": text, "voice_settings": self._voice_settings()}
        if settings.elevenlabs_model_id:
            body["model_id"] = settings.elevenlabs_model_id

        http = self._http or get_http_client()
        try:
            resp = await http.post(
                url,
                json=body,
                headers={
                    "xi-api-key": api_key,
                    "Accept": AUDIO_MIME,
                },
                timeout=float(settings.tts_timeout_seconds),
            )
        except httpx.HTTPError as e:
            raise VoiceSynthesisError(self.name, f"request failed: {e}") from e

        if not resp.is_success:
            raise VoiceSynthesisError(
                self.name,
                f"HTTP {resp.status_code}: {resp.text[:_MAX_ERROR_TEXT]}",
            )
        if not resp.content:
            raise VoiceSynthesisError(self.name, "empty audio payload")
        return resp.content
