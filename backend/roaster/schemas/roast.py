from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator

from roaster.domain.voices import Language


class RoastRequest(BaseModel):
    message: str
    language: str = Language.ENGLISH.value

    @field_validator("message")
    @classmethod
    def _message_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("message must not be empty")
        return v

    @field_validator("language")
    @classmethod
    def _language_supported(cls, v: str) -> str:
        language = Language.parse(v)
        if language is None:
            supported = ", ".join(lang.value for lang in Language)
            raise ValueError(f"unsupported language '{v}' (expected one of: {supported})")
        return language.value


class RoastResponse(BaseModel):
    success: Literal[True] = True
    reply: str
    audio: str
    source: Literal["primary", "fallback"]


class RoastFailure(BaseModel):
    success: Literal[False] = False
    error: str
    message: str


class LanguageSchema(BaseModel):
    tag: str
    display_name: str
    locale: str
