"""Weather Gateway models"""

from weather_gateway.models.weather import (
    CurrentConditions,
    TemperatureBucket,
    UpstreamWeatherResponse,
    WeatherAlert,
    WeatherCondition,
    WeatherSummary,
    classify_temperature,
)

__all__ = [
    "CurrentConditions",
    "TemperatureBucket",
    "UpstreamWeatherResponse",
    "WeatherAlert",
    "WeatherCondition",
    "WeatherSummary",
    "classify_temperature",
]
