"""Weather API route."""

from fastapi import APIRouter, Depends, Query

from weather_gateway.dependencies import get_weather_source
from weather_gateway.models.weather import WeatherSummary
from weather_gateway.protocols import WeatherSource

router = APIRouter()


def first_value(values: list[str]) -> str:
    """First occurrence of a repeated query parameter, or "" when absent."""
    return values[0] if values else ""


@router.get(
    "/",
    response_model=WeatherSummary,
    summary="Get weather summary",
    description="""
    Retrieves current conditions and alerts for a coordinate pair from
    OpenWeatherMap and reduces them to a summary.

    Coordinates are forwarded to the provider as given. Temperature is the
    feels-like value bucketed as cold (< 65°F), moderate (65-80°F) or hot (>= 80°F).
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {"alerts": [], "conditions": ["overcast clouds"], "temperature": "moderate"}
                }
            },
        },
        500: {
            "description": "Weather provider error",
            "content": {"text/plain": {"example": "Failed to retrieve weather data: Error from openweathermap service: invalid API key"}},
        },
    },
)
async def get_weather(
    lat: list[str] = Query(default=[], description="Latitude in decimal degrees; only the first value is used"),
    lon: list[str] = Query(default=[], description="Longitude in decimal degrees; only the first value is used"),
    source: WeatherSource = Depends(get_weather_source),
) -> WeatherSummary:
    """Get the weather summary for lat/lon.

    Provider failures propagate as WeatherException and are rendered
    by the registered exception handler.
    """
    data = await source.fetch_weather(first_value(lat), first_value(lon))
    return WeatherSummary.from_openweather(data)
