from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fakes import FALLBACK_AUDIO, PRIMARY_AUDIO, FakeSynth, FakeWriter
from roaster.domain.voices import build_default_voice_table
from roaster.main import app
from roaster.usecases.roast import RoastPipeline, get_pipeline


@pytest.fixture
def writer():
    return FakeWriter()


@pytest.fixture
def primary():
    return FakeSynth("elevenlabs", audio=PRIMARY_AUDIO)


@pytest.fixture
def fallback():
    return FakeSynth("openai", audio=FALLBACK_AUDIO)


@pytest.fixture
def pipeline(writer, primary, fallback):
    return RoastPipeline(
        writer=writer,
        primary=primary,
        fallback=fallback,
        voices=build_default_voice_table(),
    )


@pytest.fixture
def client(pipeline):
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
