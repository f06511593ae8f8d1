"""
Voice selection for the roast pipeline.

Each supported language maps to a VoiceProfile carrying:
- the ElevenLabs voice id used by the primary synthesizer
- the OpenAI voice name used by the fallback synthesizer
- a display name (sent to the model) and a speech locale (for clients)

The table is built once at process start and handed to the pipeline by
reference.  It is read-only: VoiceProfile is frozen and the mapping is a
MappingProxyType.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Language(Enum):
    ENGLISH = "english"
    HINDI = "hindi"
    JAPANESE = "japanese"

    @classmethod
    def parse(cls, tag: str | None) -> Language | None:
        """Case-insensitive lookup; returns None for unknown tags."""
        if not tag:
            return None
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return None


DEFAULT_LANGUAGE = Language.ENGLISH


@dataclass(frozen=True)
class VoiceProfile:
    language: Language
    display_name: str
    locale: str
    primary_voice: str   # ElevenLabs voice id
    fallback_voice: str  # OpenAI speech voice name


class VoiceTable:
    """Immutable language -> VoiceProfile lookup with an English default."""

    def __init__(self, profiles: Mapping[Language, VoiceProfile]) -> None:
        if DEFAULT_LANGUAGE not in profiles:
            raise ValueError("voice table must define the default language")
        missing = [lang.value for lang in Language if lang not in profiles]
        if missing:
            raise ValueError(f"voice table missing languages: {', '.join(missing)}")
        self._profiles: Mapping[Language, VoiceProfile] = MappingProxyType(dict(profiles))

    def resolve(self, tag: str | None) -> VoiceProfile:
        language = Language.parse(tag) or DEFAULT_LANGUAGE
        return self._profiles[language]

    def profiles(self) -> list[VoiceProfile]:
        return [self._profiles[lang] for lang in Language]


def build_default_voice_table() -> VoiceTable:
    return VoiceTable({
        Language.ENGLISH: VoiceProfile(
            language=Language.ENGLISH,
            display_name="English",
            locale="en-US",
            primary_voice="pNInz6obpgDQGcFmaJgB",  # Adam
            fallback_voice="shimmer",
        ),
        Language.HINDI: VoiceProfile(
            language=Language.HINDI,
            display_name="Hindi",
            locale="hi-IN",
            primary_voice="VcvyV7xGh7MdlH6zh5Z1",  # Kartik
            fallback_voice="alloy",
        ),
        Language.JAPANESE: VoiceProfile(
            language=Language.JAPANESE,
            display_name="Japanese",
            locale="ja-JP",
            primary_voice="lhTvHflPVOqgSWyuWQry",
            fallback_voice="verse",
        ),
    })
