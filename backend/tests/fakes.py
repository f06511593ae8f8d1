"""
In-memory stand-ins for the roast providers.

They record every call so tests can assert on ordering and arguments
without touching the network.
"""
from __future__ import annotations

from roaster.domain.errors import VoiceSynthesisError

PRIMARY_AUDIO = b"ID3\x03\x00primary-mp3-bytes\xff\xfb"
FALLBACK_AUDIO = b"ID3\x03\x00fallback-mp3-bytes\xff\xf3"
ROAST_TEXT = "Your code is so tangled even the debugger asked for a map. Ship it to a museum."


class FakeWriter:
    name = "fake-llm"

    def __init__(self, reply: str | None = ROAST_TEXT, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[list[dict]] = []

    async def write(self, messages: list[dict]) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeSynth:
    def __init__(self, name: str, audio: bytes = b"", error: Exception | None = None):
        self.name = name
        self.audio = audio
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def synthesize(self, text: str, voice: str) -> bytes:
        self.calls.append((text, voice))
        if self.error is not None:
            raise self.error
        return self.audio


def http_failure(status: int) -> VoiceSynthesisError:
    return VoiceSynthesisError("elevenlabs", f"HTTP {status}: Service Unavailable")
