"""Prompt composition for the Malak Brush image service.

The final prompt sent to the provider is the user's text followed by the
enhancement of the selected art style, joined with a ``" --"`` separator.

Template Structure::

    [User Prompt] --[Style Enhancement]

For example, ``"a neon cat"`` with the ``synthwave`` style compiles to::

    a neon cat --Synthwave style with purple and pink sunset, retro futuristic,
    neon grid, ultra high resolution

The user's text is forwarded verbatim; only the emptiness check looks at the
stripped value.  Unknown styles fall back to the default style (see
:mod:`malakbrush.core.styles`).

Usage
-----
::

    request = build_request("a neon cat", "synthwave")
    compiled = request.composed_prompt
"""

from __future__ import annotations

from malakbrush.core.results import GenerationRequest
from malakbrush.core.styles import Style, resolve_style
from malakbrush.core.validation import validate_prompt


def build_request(prompt: str | None, style: str | Style | None = None) -> GenerationRequest:
    """Validate raw input and resolve it into a :class:`GenerationRequest`.

    Args:
        prompt: Raw prompt text from the caller.
        style: Raw style key.  Missing or unknown keys resolve to the
            default style.

    Returns:
        An immutable request ready for the relay.

    Raises:
        InvalidInputError: If the prompt is missing, empty or whitespace-only.
    """
    validated = validate_prompt(prompt)
    return GenerationRequest(prompt=validated, style=resolve_style(style))


def build_prompt(prompt: str | None, style: str | Style | None = None) -> str:
    """Compile the provider prompt from raw user input.

    Args:
        prompt: Raw prompt text from the caller.
        style: Raw style key.

    Returns:
        The composed prompt string.

    Raises:
        InvalidInputError: If the prompt is missing, empty or whitespace-only.
    """
    return build_request(prompt, style).composed_prompt
