"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from weather_gateway.protocols import WeatherSource


async def get_weather_source(request: Request) -> WeatherSource:
    """
    Get the shared weather provider client from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The WeatherSource built at startup.

    Raises:
        RuntimeError: If the weather source is not initialized.
    """
    source: WeatherSource | None = getattr(request.app.state, "weather_source", None)

    if source is None:
        raise RuntimeError("Weather source not initialized. This should never happen.")

    return source
