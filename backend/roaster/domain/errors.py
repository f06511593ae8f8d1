"""
Error hierarchy for the roast pipeline.

  RoastError
    GenerationEmpty          model produced no usable text (aborts)
    VoiceSynthesisError      a synthesizer failed
      PrimaryVoiceFailure    recovered by falling back
      SecondaryVoiceFailure  fallback failed too (aborts)

Anything else raised inside the pipeline is treated as unexpected by the
route and reported with the same failure payload.
"""

from __future__ import annotations


class RoastError(Exception):
    """Base class for failures the pipeline knows how to describe."""


class GenerationEmpty(RoastError):
    def __init__(self, detail: str = "No roast generated") -> None:
        super().__init__(detail)


class VoiceSynthesisError(RoastError):
    def __init__(self, provider: str, detail: str) -> None:
        super().__init__(f"{provider}: {detail}")
        self.provider = provider
        self.detail = detail


class PrimaryVoiceFailure(VoiceSynthesisError):
    pass


class SecondaryVoiceFailure(VoiceSynthesisError):
    pass
