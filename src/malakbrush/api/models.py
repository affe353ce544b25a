"""Pydantic request and response models for the Malak Brush API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.

Models
------
GenerateRequest
    Payload for ``POST /api/generate`` — the prompt and optional style key.
GenerateResponse
    Success body of ``POST /api/generate`` — the generated image URL.
ErrorResponse
    Failure body shared by every endpoint.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerateRequest(BaseModel):
    """Request body for the ``POST /api/generate`` endpoint.

    Both fields are optional at the schema level so that a missing prompt
    reaches the prompt validator and is reported as ``InvalidInput`` (400)
    rather than as a schema error.

    Attributes:
        prompt: Free-text description of the image to generate.
        style: Style key (e.g. ``"neon"``, ``"synthwave"``).  Missing or
            unknown keys fall back to the default style, as do non-string
            values.
    """

    prompt: str | None = Field(
        default=None,
        description="Description of the image to generate.",
    )
    style: str | None = Field(
        default=None,
        description="Art style key, e.g. 'neon' or 'synthwave'.",
    )

    @field_validator("style", mode="before")
    @classmethod
    def _non_string_style_is_missing(cls, value: Any) -> Any:
        """Treat a non-string style (number, list, bool) as absent."""
        if isinstance(value, str):
            return value
        return None


class GenerateResponse(BaseModel):
    """Success body for ``POST /api/generate``.

    Attributes:
        image_url: Locator of the generated image, serialised as ``imageUrl``.
    """

    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(
        ...,
        alias="imageUrl",
        description="URL (or data URL) of the generated image.",
    )


class ErrorResponse(BaseModel):
    """Failure body returned with a non-2xx status.

    Attributes:
        error: Message intended for display to the user.
    """

    error: str = Field(
        ...,
        description="User-facing error message.",
    )
