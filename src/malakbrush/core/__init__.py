"""Core functionality for image generation.

This module provides the core components of the Malak Brush service:

- **Styles**: The fixed style enumeration and its prompt-enhancement table
- **Prompt builder**: Input validation and prompt composition
- **ProviderRelay**: The HTTP relay to the hosted image-generation gateway
- **generate_image**: Validate, compose and relay in one call
- **BrushConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)

Architecture Overview
---------------------
1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with MALAKBRUSH_ in .env files
   - Single credential accessor, ``get_api_key``

2. **Composition Layer** (styles.py, validation.py, prompt_builder.py):
   - Rejects empty prompts with ``InvalidInputError``
   - Resolves style keys with a silent fallback to the default style

3. **Relay Layer** (relay.py, generation.py):
   - One outbound request per call, no retries
   - Provider status and payload mapped onto ``GenerationResult``

Usage Example
-------------
    from malakbrush.core import ProviderRelay, config, generate_image

    relay = ProviderRelay(config)
    result = await generate_image("a neon cat", "synthwave", relay)
    if result.ok:
        print(result.image_url)
"""

from malakbrush.core.config import BrushConfig, config, get_api_key
from malakbrush.core.generation import generate_image
from malakbrush.core.prompt_builder import build_prompt, build_request
from malakbrush.core.relay import ProviderRelay
from malakbrush.core.results import ErrorKind, GenerationRequest, GenerationResult
from malakbrush.core.styles import DEFAULT_STYLE, STYLE_ENHANCEMENTS, Style, resolve_style
from malakbrush.core.validation import InvalidInputError, ValidationError

__all__ = [
    "BrushConfig",
    "config",
    "get_api_key",
    "generate_image",
    "build_prompt",
    "build_request",
    "ProviderRelay",
    "ErrorKind",
    "GenerationRequest",
    "GenerationResult",
    "DEFAULT_STYLE",
    "STYLE_ENHANCEMENTS",
    "Style",
    "resolve_style",
    "InvalidInputError",
    "ValidationError",
]
