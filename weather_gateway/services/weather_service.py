"""Weather service for OpenWeatherMap One Call API integration."""

import httpx

from weather_gateway.config import Settings
from weather_gateway.exceptions import WeatherDecodeException, WeatherNetworkException, WeatherUpstreamException
from weather_gateway.logging_config import get_logger, log_with_context
from weather_gateway.models.weather import UpstreamWeatherResponse

# Only `current` and `alerts` are needed
EXCLUDED_BLOCKS = "minutely,hourly,daily"
UNITS = "imperial"

logger = get_logger(__name__)


class OpenWeatherMapService:
    """Client for the OpenWeatherMap One Call API.

    Holds the shared HTTP client and settings created at startup. The
    client carries the request deadline. Safe to share between concurrent
    requests; it keeps no per-request state.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self._client = client
        self._settings = settings

    def build_params(self, lat: str, lon: str) -> dict[str, str]:
        """Query parameters for a One Call request; coordinates are passed through verbatim."""
        return {
            "lat": lat,
            "lon": lon,
            "exclude": EXCLUDED_BLOCKS,
            "appid": self._settings.api_key,
            "units": UNITS,
        }

    async def fetch_weather(self, lat: str, lon: str) -> UpstreamWeatherResponse:
        """Get current weather and alerts for a coordinate pair.

        The body is decoded before the status code is checked, so an
        unparseable error page is reported as a decode error.

        Args:
            lat: Latitude as received from the caller
            lon: Longitude as received from the caller

        Returns:
            Decoded One Call response

        Raises:
            WeatherNetworkException: If the provider cannot be reached
            WeatherDecodeException: If the body is not the expected JSON
            WeatherUpstreamException: If the provider returns a non-200 status
        """
        try:
            response = await self._client.get(
                self._settings.openweather_url,
                params=self.build_params(lat, lon),
            )
        except httpx.HTTPError as e:
            raise WeatherNetworkException(str(e), details={"error_type": type(e).__name__}) from e

        try:
            data = UpstreamWeatherResponse.model_validate(response.json())
        except ValueError as e:
            raise WeatherDecodeException(
                f"Failed to decode weather data: {e}",
                details={"upstream_status": response.status_code},
            ) from e

        if response.status_code != 200:
            raise WeatherUpstreamException(data.message, upstream_status=response.status_code)

        log_with_context(
            logger,
            "debug",
            "Weather data received",
            conditions=len(data.current.weather),
            alerts=len(data.alerts),
            event_type="weather_fetched",
        )
        return data
