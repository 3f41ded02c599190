"""
Shared fixtures for the evaluation service tests.
"""
import os

# Keep the module-level app in main.py from writing log files during tests.
os.environ.setdefault("LOG_FILE", "")

import pytest
from fastapi.testclient import TestClient

from config import Settings
from llm_clients import Completion
from main import create_app

SAMPLE_EVALUATION = (
    '{"title":"T","score":{"structure":80,"sentence":80,"delivery":80,'
    '"explaining_data":80,"pace":80,"overall":85},"feedback":"f",'
    '"structured_summary":"s","questions":["q1","q2","q3"]}'
)


class FakeCompletionClient:
    """Stands in for the completion service and records every call."""

    def __init__(self, content=None, error=None, completions=None):
        self.error = error
        if completions is None:
            completions = [Completion(content=content)]
        self.completions = completions
        self.calls = []

    async def create(self, messages, model, response_format=None):
        self.calls.append(
            {"messages": messages, "model": model, "response_format": response_format}
        )
        if self.error is not None:
            raise self.error
        return self.completions


@pytest.fixture
def settings():
    return Settings(log_file="", log_level="WARNING")


@pytest.fixture
def fake_client():
    return FakeCompletionClient(content=SAMPLE_EVALUATION)


@pytest.fixture
def make_client(settings):
    """Build a TestClient around an app using the given fake completion client."""

    def _make(completion_client, app_settings=None):
        app = create_app(settings=app_settings or settings, completion_client=completion_client)
        return TestClient(app, raise_server_exceptions=False)

    return _make
