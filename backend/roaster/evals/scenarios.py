"""
Evaluation scenarios: one message per scenario with expectations on the
response.

These hit the real providers, so results depend on live API keys and
account state.  `expected_source=None` accepts either voice tier.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Scenario:
    name: str
    description: str
    message: str
    language: str
    expected_source: str | None = None
    min_reply_chars: int = 20
    max_sentences: int = 6


SCENARIOS: list[Scenario] = [
    Scenario(
        name="english_code",
        description="Plain English roast of the user's code.",
        message="roast my code",
        language="English",
    ),
    Scenario(
        name="hindi_gym",
        description="Hindi roast; model should lean into Hinglish.",
        message="I go to the gym once a month and post about it every day",
        language="hindi",
    ),
    Scenario(
        name="japanese_anime",
        description="Japanese roast with the Japanese voice pair.",
        message="I have watched every anime ever made",
        language="JAPANESE",
    ),
]
