"""Malak Brush — FastAPI Application.

This module is the single entry point for the web service.  It defines the
FastAPI ``app`` instance, all REST API routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
The application is a stateless relay:

- **Configuration** comes from :data:`~malakbrush.core.config.config`
  (``MALAKBRUSH_*`` environment variables and ``.env``).
- **Image generation** is delegated to the hosted gateway through a single
  :class:`~malakbrush.core.relay.ProviderRelay` created at startup.  The
  relay shares one ``httpx.AsyncClient`` across requests; nothing else is
  shared.
- **Errors** are never raised to the client as exceptions.  Every call to
  ``POST /api/generate`` ends in a :class:`GenerationResult`, serialised as
  ``{"imageUrl": ...}`` or ``{"error": ...}`` with the matching status.
- **Cross-origin** headers allowing any origin are attached to every
  response, so a separately hosted frontend can call the API directly.

Endpoints
---------
========  ==================  ==========================================
Method    Path                Purpose
========  ==================  ==========================================
POST      ``/api/generate``   Generate one image from prompt and style
OPTIONS   ``/api/generate``   CORS preflight
GET       ``/api/styles``     Available styles and the default style
GET       ``/api/health``     Liveness and configuration status
========  ==================  ==========================================

Status Codes
------------
======  =================================================================
Status  Meaning
======  =================================================================
200     Image generated
400     Empty or missing prompt, or malformed request body
402     Provider credits exhausted
429     Provider rate limit hit
500     Service not configured, provider failure, or no image returned
======  =================================================================

Usage
-----
CLI (installed entry point)::

    malakbrush

Direct invocation::

    python -m malakbrush.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from malakbrush import __version__
from malakbrush.api.models import ErrorResponse, GenerateRequest, GenerateResponse
from malakbrush.core.config import config
from malakbrush.core.generation import generate_image
from malakbrush.core.relay import ProviderRelay
from malakbrush.core.styles import DEFAULT_STYLE, list_styles

logger = logging.getLogger(__name__)

# Attached to every response, preflight or not.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

# ---------------------------------------------------------------------------
# Application lifecycle — HTTP client and relay setup and teardown.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown lifecycle.

    On startup:
        Creates one ``httpx.AsyncClient`` and a :class:`ProviderRelay` that
        borrows it, and stores both on ``app.state``.  A missing credential
        is logged here but does not prevent startup; generate calls report
        it as ``ServiceUnavailable``.

    On shutdown:
        Closes the HTTP client and its connection pool.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    # --- Startup -----------------------------------------------------------
    client = httpx.AsyncClient(timeout=httpx.Timeout(config.request_timeout))
    app.state.http_client = client
    app.state.relay = ProviderRelay(config, client=client)
    if not app.state.relay.is_configured:
        logger.warning("No provider API key configured; generation requests will fail.")
    logger.info("ProviderRelay initialised for %s", config.gateway_url)

    yield  # Application runs here.

    # --- Shutdown ----------------------------------------------------------
    await client.aclose()
    logger.info("HTTP client closed on shutdown.")


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Malak Brush",
    description="Neon art generation API backed by a hosted image model.",
    version=__version__,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next) -> Response:
    """Attach the permissive cross-origin headers to every response.

    The headers are sent whether or not the request carries an ``Origin``,
    and preflights are never rejected for the headers they ask about.
    """
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


def get_relay(request: Request) -> ProviderRelay:
    """Return the relay created at startup (overridden in tests)."""
    return request.app.state.relay


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 with the standard error body."""
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.post(
    "/api/generate",
    response_model=GenerateResponse,
    responses={
        400: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate(
    req: GenerateRequest,
    relay: ProviderRelay = Depends(get_relay),
) -> JSONResponse:
    """Generate one image from a prompt and an optional style key.

    This endpoint:

    1. Rejects empty or whitespace-only prompts with 400 before any
       provider call.
    2. Resolves the style key, falling back to the default style.
    3. Forwards the composed prompt to the provider through the relay.
    4. Returns the provider's image URL, or the normalized error with its
       status code.

    Args:
        req: Validated :class:`GenerateRequest` payload.
        relay: The shared :class:`ProviderRelay`.

    Returns:
        ``{"imageUrl": ...}`` with 200, or ``{"error": ...}`` with 400,
        402, 429 or 500.
    """
    result = await generate_image(req.prompt, req.style, relay)
    if not result.ok:
        logger.info("Generation failed (%s): %s", result.error_kind.value, result.message)
    return JSONResponse(status_code=result.status_code, content=result.to_payload())


@app.options("/api/generate")
async def generate_preflight() -> Response:
    """Answer a CORS preflight with an empty 200 and the cross-origin headers."""
    return Response(status_code=200, headers=CORS_HEADERS)


@app.get("/api/styles")
async def get_styles() -> dict:
    """Return the available art styles for the style picker.

    Returns:
        Dictionary with ``default`` (the fallback style key) and ``styles``
        (list of ``id``/``label``/``enhancement``/``is_default`` entries).
    """
    return {
        "default": DEFAULT_STYLE.value,
        "styles": list_styles(),
    }


@app.get("/api/health")
async def health(relay: ProviderRelay = Depends(get_relay)) -> dict:
    """Return service liveness and whether a provider credential is set.

    The credential itself is never included.
    """
    return {
        "status": "ok",
        "version": __version__,
        "configured": relay.is_configured,
    }


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Configure logging and launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~malakbrush.core.config.config`
    (``MALAKBRUSH_SERVER_HOST``, ``MALAKBRUSH_SERVER_PORT``,
    ``MALAKBRUSH_LOG_LEVEL``).  Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``malakbrush`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "malakbrush.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
