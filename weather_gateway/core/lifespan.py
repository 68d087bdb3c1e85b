"""Application lifespan management."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from weather_gateway import __version__
from weather_gateway.config import Settings
from weather_gateway.logging_config import get_logger, log_with_context
from weather_gateway.middleware.logging_middleware import redact_sensitive_data
from weather_gateway.services.weather_service import OpenWeatherMapService

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log requests with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log responses with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def build_timeout(settings: Settings) -> httpx.Timeout:
    """Deadline applied to every upstream call."""
    return httpx.Timeout(
        connect=settings.upstream_connect_timeout,
        read=settings.upstream_read_timeout,
        write=5.0,
        pool=5.0,
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared HTTP client used for every upstream call."""
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(
        timeout=build_timeout(settings),
        limits=httpx.Limits(
            max_keepalive_connections=20,
            max_connections=100,
            keepalive_expiry=30.0,  # How long to keep idle connections
        ),
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so cleanup still runs and the
    error is not swallowed.
    """
    settings: Settings = app.state.settings

    log_with_context(
        logger,
        "info",
        "Starting Weather Gateway application",
        version=__version__,
        upstream=settings.openweather_url,
        event_type="app_startup",
    )

    client = create_http_client(settings)

    # Store in app state instead of global variables
    app.state.weather_source = OpenWeatherMapService(client, settings)
    log_with_context(
        logger,
        "info",
        "HTTP client initialized successfully",
        event_type="http_client_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Weather Gateway application",
            event_type="app_shutdown",
        )

        await client.aclose()
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )
