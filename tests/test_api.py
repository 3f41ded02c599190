"""
Tests for the HTTP layer
"""
import json

from config import Settings
from tests.conftest import SAMPLE_EVALUATION, FakeCompletionClient


class TestEvaluateEndpoint:

    def test_success_returns_model_json(self, make_client, fake_client):
        client = make_client(fake_client)

        response = client.post("/api/evaluate", json={"transcript": "Hello world"})

        assert response.status_code == 200
        assert response.json() == json.loads(SAMPLE_EVALUATION)
        assert len(fake_client.calls) == 1

    def test_missing_transcript(self, make_client, fake_client):
        client = make_client(fake_client)

        response = client.post("/api/evaluate", json={"audioFeatures": {"pitchVariance": 1.0}})

        assert response.status_code == 400
        assert response.json() == {"error": "Transcript is required"}
        assert fake_client.calls == []

    def test_empty_transcript(self, make_client, fake_client):
        client = make_client(fake_client)

        response = client.post("/api/evaluate", json={"transcript": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "Transcript is required"}
        assert fake_client.calls == []

    def test_audio_features_reach_system_prompt(self, make_client, fake_client):
        client = make_client(fake_client)
        body = {
            "transcript": "Hello world",
            "audioFeatures": {
                "pitchVariance": 0.3,
                "volumeMax": 0.5,
                "volumeMin": 0.4,
                "volumeAvg": 0.45,
                "pauseCount": 2,
                "pauseAvgDuration": 300,
            },
        }

        response = client.post("/api/evaluate", json=body)

        assert response.status_code == 200
        system_prompt = fake_client.calls[0]["messages"][0]["content"]
        assert "Audio Analysis Data" in system_prompt
        assert "**Pitch Variance**: 0.3" in system_prompt

    def test_wrapped_in_prose(self, make_client):
        fake = FakeCompletionClient(content='Sure! Here you go:\n{"title": "T"}\nGood luck.')
        response = make_client(fake).post("/api/evaluate", json={"transcript": "Hi"})

        assert response.status_code == 200
        assert response.json() == {"title": "T"}

    def test_fenced_json(self, make_client):
        fake = FakeCompletionClient(content=f"```json\n{SAMPLE_EVALUATION}\n```")
        response = make_client(fake).post("/api/evaluate", json={"transcript": "Hi"})

        assert response.status_code == 200
        assert response.json() == json.loads(SAMPLE_EVALUATION)

    def test_unparseable_output(self, make_client):
        raw = "The presentation was great but I have no structured output to give. " * 3
        fake = FakeCompletionClient(content=raw)
        response = make_client(fake).post("/api/evaluate", json={"transcript": "Hi"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to evaluate presentation"
        assert raw[:100] in body["details"]

    def test_empty_completion(self, make_client):
        fake = FakeCompletionClient(content=None)
        response = make_client(fake).post("/api/evaluate", json={"transcript": "Hi"})

        assert response.status_code == 500
        assert response.json()["details"].startswith("No content received")

    def test_upstream_error(self, make_client):
        fake = FakeCompletionClient(error=ConnectionError("rate limit exceeded"))
        response = make_client(fake).post("/api/evaluate", json={"transcript": "Hi"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to evaluate presentation",
            "details": "rate limit exceeded",
        }

    def test_malformed_body(self, make_client, fake_client):
        response = make_client(fake_client).post(
            "/api/evaluate",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to evaluate presentation"
        assert fake_client.calls == []

    def test_incomplete_audio_features(self, make_client, fake_client):
        body = {"transcript": "Hi", "audioFeatures": {"pitchVariance": 1.2}}
        response = make_client(fake_client).post("/api/evaluate", json=body)

        assert response.status_code == 500
        assert fake_client.calls == []

    def test_audio_values_are_not_type_checked(self, make_client, fake_client):
        body = {
            "transcript": "Hi",
            "audioFeatures": {
                "pitchVariance": "high",
                "volumeMax": 0.9,
                "volumeMin": 0.1,
                "volumeAvg": 0.5,
                "pauseCount": 2.5,
                "pauseAvgDuration": 640,
            },
        }
        response = make_client(fake_client).post("/api/evaluate", json=body)

        assert response.status_code == 200
        system_prompt = fake_client.calls[0]["messages"][0]["content"]
        assert "**Pitch Variance**: high" in system_prompt
        assert "2.5 pauses detected (Average duration: 640ms)" in system_prompt

    def test_strict_schema_mismatch(self, make_client):
        fake = FakeCompletionClient(content='{"title": "T"}')
        client = make_client(fake, Settings(log_file="", strict_schema=True))

        response = client.post("/api/evaluate", json={"transcript": "Hi"})

        assert response.status_code == 500
        assert "does not match schema" in response.json()["details"]


class TestAppLevel:

    def test_root(self, make_client, fake_client):
        response = make_client(fake_client).get("/")
        assert response.status_code == 200
        assert response.json() == {"status": "running", "msg": "Backend ready"}

    def test_generic_exception_handler(self, make_client, fake_client):
        client = make_client(fake_client)

        @client.app.get("/boom")
        async def boom():
            raise RuntimeError("boom")

        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error", "details": "boom"}

    def test_startup_builds_client_when_none_injected(self, settings, monkeypatch):
        from fastapi.testclient import TestClient
        import main

        built = FakeCompletionClient(content=SAMPLE_EVALUATION)
        monkeypatch.setattr(main, "build_completion_client", lambda s: built)

        app = main.create_app(settings=settings)
        with TestClient(app) as client:
            response = client.post("/api/evaluate", json={"transcript": "Hello world"})

        assert response.status_code == 200
        assert built.calls
