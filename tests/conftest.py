import pytest
from fastapi.testclient import TestClient

from agrishield.main import app
from agrishield.services.llm_provider import UpstreamError, get_chat_provider


class RecordingProvider:
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, messages, parameters):
        self.calls.append((list(messages), parameters))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def provider():
    return RecordingProvider(reply="Try **Swarna Sub1** rice. Shall I list more?")


@pytest.fixture
def failing_provider():
    return RecordingProvider(error=UpstreamError("quota exceeded"))


@pytest.fixture
def api_client():
    def _client(chat_provider):
        app.dependency_overrides[get_chat_provider] = lambda: chat_provider
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


@pytest.fixture
def make_provider():
    return RecordingProvider
