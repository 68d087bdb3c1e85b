"""Protocol definitions for dependency injection."""

from typing import Protocol

from weather_gateway.models.weather import UpstreamWeatherResponse


class WeatherSource(Protocol):
    """Protocol for weather providers.

    This protocol defines the interface the weather route depends on,
    allowing the OpenWeatherMap client to be swapped for a test double.
    """

    async def fetch_weather(self, lat: str, lon: str) -> UpstreamWeatherResponse:
        """Fetch current weather and alerts for a coordinate pair.

        Args:
            lat: Latitude exactly as received from the caller
            lon: Longitude exactly as received from the caller

        Returns:
            Decoded provider response

        Raises:
            WeatherException: On network, decode or provider errors
        """
        ...
