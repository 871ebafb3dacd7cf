import json

import pytest

from llmchat import OpenAIClient
from llmchat.transport import HttpResponse


class FakeTransport:
    """Records outgoing requests and replays canned responses."""

    def __init__(self, status_code=200, body=b"", error=None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls = []

    def post(self, url, headers, body, timeout_ms):
        self.calls.append({"url": url, "headers": headers, "body": body, "timeout_ms": timeout_ms})
        if self.error is not None:
            raise self.error
        return HttpResponse(status_code=self.status_code, body=self.body)

    @property
    def last_payload(self):
        return json.loads(self.calls[-1]["body"].decode("utf-8"))


def completion(content, refusal=None, model="gpt-4.1-nano", usage=None):
    message = {"role": "assistant", "content": content, "refusal": refusal}
    return json.dumps(
        {
            "id": "chatcmpl-123",
            "choices": [{"index": 0, "message": message, "finish_reason": "stop"}],
            "model": model,
            "usage": usage if usage is not None else {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7},
        }
    ).encode("utf-8")


@pytest.fixture(autouse=True)
def _no_env_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("LLM_PROVIDER", raising=False)


@pytest.fixture
def fake_transport():
    return FakeTransport(body=completion("hello"))


@pytest.fixture
def client(fake_transport):
    return OpenAIClient(api_key="sk-test", transport=fake_transport)
