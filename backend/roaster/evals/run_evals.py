"""
Evaluation runner: pushes each scenario through the real pipeline.

Usage:
    cd backend
    python -m roaster.evals.run_evals

Needs OPENAI_API_KEY (and ELEVENLABS_API_KEY to exercise the primary
voice).  Checks reply length, sentence count, the MP3 header, and the
voice tier, then prints a report.
"""

from __future__ import annotations

import asyncio
import re
import sys

from roaster.core.logging import setup_logging
from roaster.domain.audio import looks_like_mp3
from roaster.evals.scenarios import SCENARIOS, Scenario
from roaster.infra.providers.clients import close_clients
from roaster.usecases.roast import RoastPipeline, get_pipeline

_SENTENCE_END = re.compile(r"[.!?。！？।]+")


async def run_scenario(pipeline: RoastPipeline, scenario: Scenario) -> tuple[bool, list[str], str]:
    """Run one scenario and return (passed, failure_messages, source)."""
    failures: list[str] = []

    try:
        result = await pipeline.run(scenario.message, scenario.language, request_id=f"eval_{scenario.name}")
    except Exception as e:
        return False, [f"Pipeline raised {type(e).__name__}: {e}"], "-"

    if len(result.reply) < scenario.min_reply_chars:
        failures.append(
            f"Reply too short: {len(result.reply)} < {scenario.min_reply_chars} chars"
        )

    sentences = [s for s in _SENTENCE_END.split(result.reply) if s.strip()]
    if len(sentences) > scenario.max_sentences:
        failures.append(
            f"Reply too long: {len(sentences)} sentences > {scenario.max_sentences}"
        )

    if not looks_like_mp3(result.audio):
        failures.append(f"Audio is not MP3 (starts with {result.audio[:4]!r})")

    if scenario.expected_source and result.source != scenario.expected_source:
        failures.append(
            f"Source: expected '{scenario.expected_source}', got '{result.source}'"
        )

    return len(failures) == 0, failures, f"{result.source}/{result.provider}"


async def main():
    setup_logging()
    pipeline = get_pipeline()

    print("=" * 60)
    print("AI Roaster Evaluation Harness")
    print("=" * 60)
    print()

    passed_count = 0
    total = len(SCENARIOS)

    try:
        for scenario in SCENARIOS:
            print(f"--- {scenario.name}: {scenario.description}")

            ok, failures, source = await run_scenario(pipeline, scenario)

            if ok:
                print(f"  PASS ({source})")
                passed_count += 1
            else:
                print(f"  FAIL ({source}):")
                for f in failures:
                    print(f"    - {f}")
            print()
    finally:
        await close_clients()

    print("=" * 60)
    print(f"Results: {passed_count}/{total} passed")
    print("=" * 60)

    if passed_count < total:
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
