"""Validation utilities for inbound generation requests."""

import logging

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


class InvalidInputError(ValidationError):
    """The request cannot be served because the caller sent bad input."""

    pass


def validate_prompt(prompt: str | None) -> str:
    """Validate that a prompt carries some text.

    Args:
        prompt: Raw prompt text from the caller

    Returns:
        The prompt, unchanged

    Raises:
        InvalidInputError: If the prompt is missing, empty or whitespace-only
    """
    if prompt is None or not prompt.strip():
        logger.debug("Rejected empty prompt")
        raise InvalidInputError("Prompt is required")
    return prompt
