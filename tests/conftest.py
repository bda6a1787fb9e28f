import json

import httpx
import pytest
from fastapi.testclient import TestClient

from linkedinese.main import app
from linkedinese.src.config import Settings, get_settings

def make_settings(**overrides) -> Settings:
    values = dict(
        groq_api_key=None,
        openai_api_key=None,
        deepseek_api_key=None,
        deepseek_api_base_url=None,
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore

def completion_payload(content):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [
            {"index": 0, "finish_reason": "stop", "message": {"role": "assistant", "content": content}}
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }

class FakeProvider:
    """Stands in for an OpenAI-compatible chat-completion endpoint."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.payload = completion_payload("Excited to share this milestone! 🚀")
        self.raise_exc = None
        self.raw_body = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_exc is not None:
            raise self.raise_exc
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body, headers={"content-type": "text/html"})
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)

@pytest.fixture
def provider():
    return FakeProvider()

@pytest.fixture
def use_settings():
    def _use(**overrides):
        app.dependency_overrides[get_settings] = lambda: make_settings(**overrides)
    yield _use
    app.dependency_overrides.pop(get_settings, None)

@pytest.fixture
def client(provider, use_settings):
    use_settings(groq_api_key="groq-test-key")
    mock_client = httpx.AsyncClient(transport=httpx.MockTransport(provider.handler))
    with TestClient(app) as c:
        app.state.httpx_client = mock_client
        yield c
        c.portal.call(mock_client.aclose)
