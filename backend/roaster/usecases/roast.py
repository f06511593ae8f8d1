"""
Roast use case: one message in, roast text + voice audio out.

Handles a single request, strictly in order:
  1.  Build the persona prompt for the requested language
  2.  Ask the chat model for a roast
  3.  Abort with GenerationEmpty if the reply is blank (no synthesis)
  4.  Resolve the voice profile (unknown tags -> English)
  5.  Synthesize with the primary voice provider
  6.  On failure (error status, empty audio, transport error) fall back
      to the secondary provider, exactly once
  7.  Return reply + audio bytes + which tier produced the audio

Voice providers are tried as an ordered attempt list and the first one
that returns audio wins.  No retries, no backoff.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol

from roaster.core.logging import logger
from roaster.domain.errors import (
    GenerationEmpty,
    PrimaryVoiceFailure,
    SecondaryVoiceFailure,
    VoiceSynthesisError,
)
from roaster.domain.persona import build_roast_messages
from roaster.domain.voices import VoiceProfile, VoiceTable, build_default_voice_table

SOURCE_PRIMARY = "primary"
SOURCE_FALLBACK = "fallback"


class RoastWriter(Protocol):
    name: str

    async def write(self, messages: list[dict]) -> str: ...


class VoiceSynthesizer(Protocol):
    name: str

    async def synthesize(self, text: str, voice: str) -> bytes: ...


@dataclass(frozen=True)
class RoastResult:
    reply: str
    audio: bytes
    source: str    # SOURCE_PRIMARY | SOURCE_FALLBACK
    provider: str  # name of the synthesizer that produced the audio


class RoastPipeline:
    """Text generation followed by voice synthesis with a single fallback."""

    def __init__(
        self,
        writer: RoastWriter,
        primary: VoiceSynthesizer,
        fallback: VoiceSynthesizer,
        voices: VoiceTable,
    ) -> None:
        self.writer = writer
        self.primary = primary
        self.fallback = fallback
        self.voices = voices

    async def run(self, message: str, language: str | None, request_id: str = "-") -> RoastResult:
        profile = self.voices.resolve(language)

        # --- 1-3. Generate the roast ---
        t_gen = time.monotonic()
        messages = build_roast_messages(message, profile.display_name)
        reply = await self.writer.write(messages)
        gen_ms = (time.monotonic() - t_gen) * 1000
        if not reply or not reply.strip():
            raise GenerationEmpty()
        reply = reply.strip()

        logger.info(
            "Request %s: roast generated (%s, %d chars, %.0fms)",
            request_id,
            profile.language.value,
            len(reply),
            gen_ms,
        )

        # --- 4-6. Synthesize, primary then fallback ---
        t_tts = time.monotonic()
        audio, source, provider = await self._synthesize(reply, profile, request_id)
        tts_ms = (time.monotonic() - t_tts) * 1000

        logger.info(
            "Request %s: audio generated using %s (%s, %d bytes, %.0fms)",
            request_id,
            provider,
            source,
            len(audio),
            tts_ms,
        )
        return RoastResult(reply=reply, audio=audio, source=source, provider=provider)

    async def _synthesize(
        self,
        text: str,
        profile: VoiceProfile,
        request_id: str,
    ) -> tuple[bytes, str, str]:
        attempts = [
            (SOURCE_PRIMARY, self.primary, profile.primary_voice, PrimaryVoiceFailure),
            (SOURCE_FALLBACK, self.fallback, profile.fallback_voice, SecondaryVoiceFailure),
        ]
        last_index = len(attempts) - 1
        for i, (source, synth, voice, failure_cls) in enumerate(attempts):
            try:
                return await synth.synthesize(text, voice), source, synth.name
            except VoiceSynthesisError as e:
                failure = failure_cls(e.provider, e.detail)
                if i == last_index:
                    raise failure from e
                logger.warning(
                    "Request %s: %s voice failed (%s), switching to %s",
                    request_id,
                    source,
                    failure,
                    attempts[i + 1][1].name,
                )
        raise AssertionError("unreachable")


# ---------------------------------------------------------------------------
# Process-wide pipeline (lazy)
# ---------------------------------------------------------------------------

_pipeline: RoastPipeline | None = None


def get_pipeline() -> RoastPipeline:
    """Build the pipeline with real providers on first use.

    Provider clients themselves are created on first call, so a missing
    API key surfaces as a request failure rather than a startup crash.
    """
    global _pipeline
    if _pipeline is None:
        from roaster.infra.providers.elevenlabs_tts import ElevenLabsSynthesizer
        from roaster.infra.providers.openai_chat import OpenAIRoastWriter
        from roaster.infra.providers.openai_tts import OpenAISpeechSynthesizer

        _pipeline = RoastPipeline(
            writer=OpenAIRoastWriter(),
            primary=ElevenLabsSynthesizer(),
            fallback=OpenAISpeechSynthesizer(),
            voices=build_default_voice_table(),
        )
    return _pipeline
