"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from weather_gateway.exceptions import ErrorCode, WeatherException
from weather_gateway.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

WEATHER_ERROR_PREFIX = "Failed to retrieve weather data"


async def weather_exception_handler(request: Request, exc: WeatherException) -> PlainTextResponse:
    """Report a failed provider call as a plain-text message.

    Network, decode and provider errors all look the same to the caller:
    the error code only goes to the log.
    """
    msg = f"{WEATHER_ERROR_PREFIX}: {exc.message}"
    log_with_context(
        logger,
        "error",
        msg,
        error_code=exc.code.value,
        status_code=exc.status_code,
        details=exc.details,
        method=request.method,
        path=request.url.path,
        event_type="weather_error",
    )
    return PlainTextResponse(msg, status_code=exc.status_code)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        path=request.url.path,
        event_type="unhandled_error",
    )
    # Also log the traceback separately for debugging
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(WeatherException, weather_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
