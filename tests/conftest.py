"""Shared pytest fixtures for Malak Brush tests."""

from __future__ import annotations

import json
from collections.abc import Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from malakbrush.api.main import app, get_relay
from malakbrush.core.config import BrushConfig
from malakbrush.core.relay import ProviderRelay

TEST_GATEWAY_URL = "https://gateway.test/v1/chat/completions"
TEST_MODEL_ID = "test/image-model"
TEST_API_KEY = "test-secret-key"


def image_response_body(url: str = "https://example/cat.png") -> dict:
    """Build a provider success body carrying a single image URL.

    Args:
        url: Image URL to embed

    Returns:
        Dictionary in the chat-completions image shape
    """
    return {
        "choices": [
            {
                "message": {
                    "role": "assistant",
                    "content": "Here is your image.",
                    "images": [
                        {
                            "type": "image_url",
                            "image_url": {"url": url},
                        }
                    ],
                }
            }
        ]
    }


class FakeProvider:
    """Stand-in for the image-generation gateway.

    Serves one canned response (or raises one transport error) for every
    request and records each request so tests can inspect what was sent,
    or assert that nothing was sent at all.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body: object = image_response_body()
        self.text_body: str | None = None
        self.error: Exception | None = None

    def respond(self, status_code: int, json_body: object = None, text: str | None = None) -> None:
        """Configure the next responses."""
        self.status_code = status_code
        self.json_body = json_body
        self.text_body = text

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text_body is not None:
            return httpx.Response(self.status_code, text=self.text_body)
        return httpx.Response(self.status_code, json=self.json_body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch) -> None:
    """Keep a developer's real credential out of the tests."""
    monkeypatch.delenv("MALAKBRUSH_API_KEY", raising=False)
    monkeypatch.delenv("LOVABLE_API_KEY", raising=False)


@pytest.fixture
def test_config() -> BrushConfig:
    """Create a configured test configuration pointing at a fake gateway.

    Returns:
        BrushConfig instance for testing
    """
    return BrushConfig(
        api_key=TEST_API_KEY,
        gateway_url=TEST_GATEWAY_URL,
        model_id=TEST_MODEL_ID,
        request_timeout=5.0,
        _env_file=None,
    )


@pytest.fixture
def unconfigured_config() -> BrushConfig:
    """Create a test configuration without a provider credential.

    Returns:
        BrushConfig instance with no API key
    """
    return BrushConfig(
        gateway_url=TEST_GATEWAY_URL,
        model_id=TEST_MODEL_ID,
        _env_file=None,
    )


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Create a fake provider that returns an image by default.

    Returns:
        FakeProvider instance
    """
    return FakeProvider()


@pytest.fixture
def relay(test_config: BrushConfig, fake_provider: FakeProvider) -> ProviderRelay:
    """Create a relay wired to the fake provider.

    Returns:
        ProviderRelay instance for testing
    """
    return ProviderRelay(test_config, client=fake_provider.client())


@pytest.fixture
def test_client(relay: ProviderRelay) -> Generator[TestClient, None, None]:
    """Create a TestClient whose generate route uses the fake provider.

    Yields:
        TestClient bound to the application

    Cleanup:
        Dependency overrides are removed after the test completes
    """
    app.dependency_overrides[get_relay] = lambda: relay
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
