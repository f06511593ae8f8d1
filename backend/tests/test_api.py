import base64

from fakes import FALLBACK_AUDIO, PRIMARY_AUDIO, http_failure
from roaster.domain.voices import Language

AUDIO_PREFIX = "data:audio/mpeg;base64,"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_roast_with_healthy_providers(client):
    response = client.post("/api/v1/roast", json={"message": "roast my code", "language": "English"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["reply"]
    assert data["source"] == "primary"
    assert data["audio"].startswith(AUDIO_PREFIX)
    assert set(data) == {"success", "reply", "audio", "source"}


def test_audio_round_trips_primary_bytes(client):
    data = client.post("/api/v1/roast", json={"message": "roast my code", "language": "english"}).json()
    assert base64.b64decode(data["audio"][len(AUDIO_PREFIX):]) == PRIMARY_AUDIO


def test_primary_503_falls_back(client, primary, fallback):
    primary.error = http_failure(503)

    response = client.post("/api/v1/roast", json={"message": "roast my code", "language": "English"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["source"] == "fallback"
    assert base64.b64decode(data["audio"][len(AUDIO_PREFIX):]) == FALLBACK_AUDIO
    assert len(fallback.calls) == 1


def test_writer_exception_returns_500(client, writer, primary):
    writer.error = RuntimeError("upstream exploded")

    response = client.post("/api/v1/roast", json={"message": "roast my code", "language": "English"})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "Failed to roast"
    assert "upstream exploded" in data["message"]
    assert primary.calls == []


def test_empty_generation_returns_500(client, writer, primary):
    writer.reply = ""

    response = client.post("/api/v1/roast", json={"message": "roast my code"})

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert primary.calls == []


def test_both_voices_failing_returns_500(client, primary, fallback):
    primary.error = http_failure(503)
    fallback.error = http_failure(500)

    response = client.post("/api/v1/roast", json={"message": "roast my code", "language": "hindi"})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert "reply" not in data
    assert "audio" not in data


def test_language_defaults_to_english(client, primary):
    response = client.post("/api/v1/roast", json={"message": "roast me"})

    assert response.status_code == 200
    assert primary.calls[0][1] == "pNInz6obpgDQGcFmaJgB"


def test_unsupported_language_is_rejected(client, writer):
    response = client.post("/api/v1/roast", json={"message": "roast me", "language": "klingon"})

    assert response.status_code == 422
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "Invalid request"
    assert "klingon" in data["message"]
    assert writer.calls == []


def test_blank_message_is_rejected(client, writer):
    response = client.post("/api/v1/roast", json={"message": "   ", "language": "english"})

    assert response.status_code == 422
    assert response.json()["success"] is False
    assert writer.calls == []


def test_message_is_stripped_before_prompting(client, writer):
    client.post("/api/v1/roast", json={"message": "  my haircut  ", "language": "japanese"})

    assert writer.calls[0][1]["content"] == "Language: Japanese. Roast this: my haircut"


def test_languages_endpoint(client):
    response = client.get("/api/v1/languages")

    assert response.status_code == 200
    data = response.json()
    assert [item["tag"] for item in data] == [lang.value for lang in Language]
    assert {"tag": "hindi", "display_name": "Hindi", "locale": "hi-IN"} in data
