"""Shared fixtures: a deterministic LLM client and a fake Gemini transport."""

import json

import httpx
import pytest

from gemini_commit.llm import GeminiClient, LLMClient


class FakeClient(LLMClient):
    """Returns a fixed reply and records every prompt it was given."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    @property
    def name(self) -> str:
        return "Fake"


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def make_gemini():
    """Return a factory building a GeminiClient whose HTTP goes to `handler`.

    Requests seen by the transport are appended to the returned list.
    """
    def _make(handler, api_key="test-key", **kwargs):
        seen = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = GeminiClient(api_key, transport=httpx.MockTransport(_record), **kwargs)
        return client, seen
    return _make


@pytest.fixture
def request_json():
    def _decode(request: httpx.Request):
        return json.loads(request.content)
    return _decode
