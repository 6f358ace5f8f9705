"""Shared fixtures for IssueClassifier tests."""

import json

import httpx
import pytest

from issueclassifier.config import ProviderCredentials

PRIMARY_HOST = "api.mosaia.ai"
FALLBACK_HOST = "openrouter.ai"


def completion_body(text: str) -> dict:
    """Build an OpenAI-style chat completion payload."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": text},
                "finish_reason": "stop",
            }
        ],
    }


class FakeProviders:
    """
    Routes requests to scripted primary and fallback behavior.

    Each behavior is either response text (returned as a completion), an
    httpx.Response, or an exception instance to raise.
    """

    def __init__(self, primary=None, fallback=None):
        self.behaviors = {PRIMARY_HOST: primary, FALLBACK_HOST: fallback}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        behavior = self.behaviors.get(request.url.host)

        if behavior is None:
            raise httpx.ConnectError("no route to host", request=request)
        if isinstance(behavior, Exception):
            raise behavior
        if isinstance(behavior, httpx.Response):
            return behavior
        return httpx.Response(200, json=completion_body(behavior))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def hosts_called(self) -> list[str]:
        return [r.url.host for r in self.requests]

    def payload(self, index: int) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def credentials():
    """Complete set of provider credentials."""
    return ProviderCredentials(
        primary_api_key="mosaia-key",
        primary_agent_id="agent-123",
        fallback_api_key="openrouter-key",
    )


@pytest.fixture
def make_providers():
    """Factory for scripted provider transports."""
    return FakeProviders


@pytest.fixture
def completion():
    """Factory for completion payloads."""
    return completion_body
