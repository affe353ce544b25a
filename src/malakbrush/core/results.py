"""Request and result types shared by the composer, relay and API layers.

``GenerationRequest`` is what the composer produces; ``GenerationResult`` is
what every generation call ends with.  A result holds either an image URL or
an error, never both and never neither; the constructor enforces this so a
half-built result cannot leave the relay.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from malakbrush.core.styles import STYLE_ENHANCEMENTS, Style

# Separator placed between the user's prompt and the style enhancement.
PROMPT_SEPARATOR = " --"


class ErrorKind(str, Enum):
    """Normalized failure categories, each tied to the HTTP status it maps to."""

    INVALID_INPUT = "InvalidInput"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    RATE_LIMITED = "RateLimited"
    QUOTA_EXHAUSTED = "QuotaExhausted"
    GENERATION_FAILED = "GenerationFailed"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.SERVICE_UNAVAILABLE: 500,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.QUOTA_EXHAUSTED: 402,
    ErrorKind.GENERATION_FAILED: 500,
}


@dataclass(frozen=True)
class GenerationRequest:
    """A validated prompt paired with its resolved style.

    Attributes:
        prompt: The user's prompt text, as typed.
        style: Resolved style (the default has already been applied).
    """

    prompt: str
    style: Style

    @property
    def enhancement(self) -> str:
        return STYLE_ENHANCEMENTS[self.style]

    @property
    def composed_prompt(self) -> str:
        """The prompt sent to the provider: user text plus style enhancement."""
        return f"{self.prompt}{PROMPT_SEPARATOR}{self.enhancement}"


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a single generation call.

    Use :meth:`success` or :meth:`failure` rather than the constructor.

    Attributes:
        image_url: Locator of the generated image on success.
        error_kind: Failure category on error.
        message: User-facing error message on error.
    """

    image_url: str | None = None
    error_kind: ErrorKind | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        has_image = self.image_url is not None
        has_error = self.error_kind is not None
        if has_image == has_error:
            raise ValueError("GenerationResult must hold exactly one of image_url or error_kind")
        if has_error and not self.message:
            raise ValueError("Failed GenerationResult requires a message")

    @classmethod
    def success(cls, image_url: str) -> GenerationResult:
        return cls(image_url=image_url)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> GenerationResult:
        return cls(error_kind=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.image_url is not None

    @property
    def status_code(self) -> int:
        """HTTP status to report this result with (200 on success)."""
        if self.error_kind is None:
            return 200
        return self.error_kind.status_code

    def to_payload(self) -> dict:
        """Serialise to the inbound wire shape (``imageUrl`` or ``error``)."""
        if self.ok:
            return {"imageUrl": self.image_url}
        return {"error": self.message}
