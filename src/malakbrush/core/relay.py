"""Provider relay for the Malak Brush image service.

This module provides :class:`ProviderRelay`, the single point of contact with
the hosted image-generation gateway.  One call to :meth:`ProviderRelay.generate`
issues exactly one HTTP request and always ends in a
:class:`~malakbrush.core.results.GenerationResult`.

Key Responsibilities
--------------------
- **Fail-fast configuration check** — when no credential is configured the
  relay returns ``ServiceUnavailable`` without touching the network.
- **Request assembly** — a chat-completions body with the composed prompt as
  the only user message, requesting both image and text modalities.
- **Status mapping** — 429 becomes ``RateLimited``, 402 becomes
  ``QuotaExhausted``, any other non-2xx becomes ``GenerationFailed`` carrying
  the provider status and body.
- **Response parsing** — the image URL lives at
  ``choices[0].message.images[0].image_url.url``; every level is checked and
  a missing or malformed level yields ``GenerationFailed``.
- **Transport faults** — ``httpx`` errors (connect failures, timeouts) become
  ``GenerationFailed`` with the fault's message.

The relay keeps no state between calls and never retries: each call may
consume provider quota, so retrying is left to the user.

Usage
-----
::

    from malakbrush.core.config import config
    from malakbrush.core.relay import ProviderRelay

    relay = ProviderRelay(config)
    result = await relay.generate("a neon cat --Synthwave style ...")
    await relay.aclose()

See Also
--------
- :mod:`malakbrush.core.generation` — validates input before calling the relay.
- :mod:`malakbrush.api.main` — shares one relay across requests.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from malakbrush.core.config import BrushConfig, get_api_key
from malakbrush.core.results import ErrorKind, GenerationResult

logger = logging.getLogger(__name__)

# Provider bodies are echoed into error messages; keep them readable.
_MAX_ERROR_BODY_CHARS = 500

MSG_NOT_CONFIGURED = "AI service not configured"
MSG_RATE_LIMITED = "Rate limit exceeded. Please try again later."
MSG_QUOTA_EXHAUSTED = "Credits exhausted. Please add funds to your Lovable workspace."
MSG_NO_IMAGE = "No image generated"


def build_payload(composed_prompt: str, model_id: str) -> dict[str, Any]:
    """Build the chat-completions request body for the provider."""
    return {
        "model": model_id,
        "messages": [
            {
                "role": "user",
                "content": composed_prompt,
            }
        ],
        "modalities": ["image", "text"],
    }


def extract_image_url(data: Any) -> str | None:
    """Return ``choices[0].message.images[0].image_url.url`` or ``None``.

    Each level is checked for presence and type so that any unexpected
    shape returns ``None`` instead of raising.
    """
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    choice = choices[0]
    if not isinstance(choice, dict):
        return None
    message = choice.get("message")
    if not isinstance(message, dict):
        return None
    images = message.get("images")
    if not isinstance(images, list) or not images:
        return None
    image = images[0]
    if not isinstance(image, dict):
        return None
    image_url = image.get("image_url")
    if not isinstance(image_url, dict):
        return None
    url = image_url.get("url")
    if not isinstance(url, str) or not url:
        return None
    return url


class ProviderRelay:
    """Forwards composed prompts to the image-generation gateway.

    Attributes:
        _config (BrushConfig):
            Provider endpoint, model and timeout settings.
        _client (httpx.AsyncClient | None):
            HTTP client used for provider calls.  Created lazily on the
            first call when not supplied.
        _owns_client (bool):
            Whether :meth:`aclose` should close ``_client``.  Borrowed
            clients are left open for their owner.
    """

    def __init__(self, config: BrushConfig, client: httpx.AsyncClient | None = None) -> None:
        """Initialise the relay.

        Args:
            config: Application configuration.
            client: Optional pre-built HTTP client.  Tests pass one backed by
                ``httpx.MockTransport``; the API shares one per process.
        """
        self._config = config
        self._client = client
        self._owns_client = client is None

    @property
    def is_configured(self) -> bool:
        """Whether a provider credential is available."""
        return get_api_key(self._config) is not None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._config.request_timeout))
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if this relay created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def generate(self, composed_prompt: str) -> GenerationResult:
        """Request one image for an already-validated composed prompt.

        Args:
            composed_prompt: User prompt plus style enhancement.

        Returns:
            A successful result with the provider's image URL, or a failure
            result describing what went wrong.
        """
        api_key = get_api_key(self._config)
        if api_key is None:
            logger.error("Provider API key not configured")
            return GenerationResult.failure(ErrorKind.SERVICE_UNAVAILABLE, MSG_NOT_CONFIGURED)

        logger.info("Generating image with prompt: %s", composed_prompt)

        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        payload = build_payload(composed_prompt, self._config.model_id)

        try:
            response = await self._get_client().post(
                self._config.gateway_url,
                json=payload,
                headers=headers,
                timeout=self._config.request_timeout,
            )
        except httpx.HTTPError as exc:
            logger.error("Provider request failed: %s", exc)
            return GenerationResult.failure(
                ErrorKind.GENERATION_FAILED,
                str(exc) or type(exc).__name__,
            )

        logger.info("Provider responded with status %s", response.status_code)
        return self._interpret(response)

    def _interpret(self, response: httpx.Response) -> GenerationResult:
        """Map a provider response onto a :class:`GenerationResult`."""
        status = response.status_code

        if status == 429:
            logger.warning("Provider rate limit exceeded")
            return GenerationResult.failure(ErrorKind.RATE_LIMITED, MSG_RATE_LIMITED)

        if status == 402:
            logger.warning("Provider credits exhausted")
            return GenerationResult.failure(ErrorKind.QUOTA_EXHAUSTED, MSG_QUOTA_EXHAUSTED)

        if not response.is_success:
            body = response.text[:_MAX_ERROR_BODY_CHARS]
            logger.error("Provider error: %s %s", status, body)
            return GenerationResult.failure(
                ErrorKind.GENERATION_FAILED,
                f"Failed to generate image (provider status {status}): {body}",
            )

        try:
            data = response.json()
        except ValueError:
            logger.error("Provider returned a non-JSON body")
            return GenerationResult.failure(ErrorKind.GENERATION_FAILED, MSG_NO_IMAGE)

        image_url = extract_image_url(data)
        if image_url is None:
            logger.error("No image in provider response")
            return GenerationResult.failure(ErrorKind.GENERATION_FAILED, MSG_NO_IMAGE)

        return GenerationResult.success(image_url)
