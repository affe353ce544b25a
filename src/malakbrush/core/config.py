"""Configuration management for the Malak Brush image service.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the MALAKBRUSH_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (MALAKBRUSH_* prefix)
2. .env file in the project root
3. Default values defined in BrushConfig

The provider credential is also accepted under the bare ``LOVABLE_API_KEY``
name so existing deployments keep working.

Example .env file:
    MALAKBRUSH_API_KEY=sk-...
    MALAKBRUSH_MODEL_ID=google/gemini-2.5-flash-image-preview
    MALAKBRUSH_REQUEST_TIMEOUT=60
    MALAKBRUSH_SERVER_PORT=7860

Credential Access
-----------------
The credential is only ever read through :func:`get_api_key`.  Tests swap
in a fake key by building their own :class:`BrushConfig`; nothing else in
the package touches ``api_key`` directly.
"""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_MODEL_ID = "google/gemini-2.5-flash-image-preview"


class BrushConfig(BaseSettings):
    """Main configuration for the Malak Brush service.

    Attributes
    ----------
    Provider Settings:
        api_key : SecretStr | None
            Bearer credential for the image-generation gateway.  ``None``
            means the service is not configured and every generation call
            fails fast with ``ServiceUnavailable``.
        gateway_url : str
            Chat-completions endpoint of the provider.
        model_id : str
            Provider model identifier sent with every request.
        request_timeout : float
            Seconds to wait for the provider before giving up.

    Server Settings:
        server_host : str
            Bind address for uvicorn.
        server_port : int
            Port for uvicorn (1024-65535).
        log_level : str
            Root log level used by the CLI entry point.

    Examples
    --------
        >>> cfg = BrushConfig(api_key="test-key", _env_file=None)
        >>> get_api_key(cfg)
        'test-key'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MALAKBRUSH_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Provider settings
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("MALAKBRUSH_API_KEY", "LOVABLE_API_KEY"),
        description="Bearer credential for the image-generation gateway",
    )
    gateway_url: str = Field(
        default=DEFAULT_GATEWAY_URL,
        description="Chat-completions endpoint that returns generated images",
    )
    model_id: str = Field(
        default=DEFAULT_MODEL_ID,
        description="Provider model identifier",
    )
    request_timeout: float = Field(
        default=120.0,
        gt=0,
        description="Seconds to wait for the provider response",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level applied by the CLI entry point",
    )


def get_api_key(cfg: BrushConfig) -> str | None:
    """Return the provider credential, or ``None`` when it is not configured.

    Blank or whitespace-only values count as absent.
    """
    if cfg.api_key is None:
        return None
    value = cfg.api_key.get_secret_value().strip()
    return value or None


# Global configuration instance, loaded from MALAKBRUSH_* variables and .env.
config = BrushConfig()
