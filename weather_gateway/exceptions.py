"""Custom exceptions for Weather Gateway with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses and logs."""

    # Generic errors
    GATEWAY_ERROR = "GATEWAY_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Weather errors
    WEATHER_ERROR = "WEATHER_ERROR"
    WEATHER_NETWORK_ERROR = "WEATHER_NETWORK_ERROR"
    WEATHER_DECODE_ERROR = "WEATHER_DECODE_ERROR"
    WEATHER_UPSTREAM_ERROR = "WEATHER_UPSTREAM_ERROR"


class GatewayException(Exception):
    """Base exception for gateway errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GATEWAY_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize gateway exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class WeatherException(GatewayException):
    """Weather provider errors.

    Every kind is reported to callers as a 500; the code only shows up in logs.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class WeatherNetworkException(WeatherException):
    """Provider unreachable: DNS, connect, timeout or other transport failure."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_NETWORK_ERROR,
            details=details,
        )


class WeatherDecodeException(WeatherException):
    """Provider body is not JSON in the expected shape."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_DECODE_ERROR,
            details=details,
        )


class WeatherUpstreamException(WeatherException):
    """Provider answered with a non-200 status."""

    def __init__(self, provider_message: str, upstream_status: int, details: dict[str, Any] | None = None):
        super().__init__(
            f"Error from openweathermap service: {provider_message}",
            code=ErrorCode.WEATHER_UPSTREAM_ERROR,
            details={"provider_message": provider_message, "upstream_status": upstream_status, **(details or {})},
        )
        self.provider_message = provider_message
        self.upstream_status = upstream_status
