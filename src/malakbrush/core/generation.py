"""End-to-end generation: validate, compose, relay.

:func:`generate_image` is the one function the API layer calls.  It never
raises: bad input becomes an ``InvalidInput`` result before any network
activity, and anything unexpected is logged with its traceback and turned
into ``GenerationFailed``.
"""

from __future__ import annotations

import logging

from malakbrush.core.prompt_builder import build_request
from malakbrush.core.relay import ProviderRelay
from malakbrush.core.results import ErrorKind, GenerationResult
from malakbrush.core.styles import Style
from malakbrush.core.validation import InvalidInputError

logger = logging.getLogger(__name__)


async def generate_image(
    prompt: str | None,
    style: str | Style | None,
    relay: ProviderRelay,
) -> GenerationResult:
    """Generate one image for a raw prompt and style key.

    Args:
        prompt: Raw prompt text from the caller.
        style: Raw style key; missing or unknown keys use the default style.
        relay: Relay used for the provider call.

    Returns:
        Exactly one :class:`GenerationResult`.
    """
    try:
        request = build_request(prompt, style)
    except InvalidInputError as exc:
        return GenerationResult.failure(ErrorKind.INVALID_INPUT, str(exc))

    logger.info("Generating image with style %r", request.style.value)

    try:
        return await relay.generate(request.composed_prompt)
    except Exception as exc:
        logger.exception("Unexpected error during image generation")
        return GenerationResult.failure(
            ErrorKind.GENERATION_FAILED,
            str(exc) or "Unknown error",
        )
