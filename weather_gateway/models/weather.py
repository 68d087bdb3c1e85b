"""Pydantic models for weather data."""

import bisect
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OpenWeatherModel(BaseModel):
    """Base for decoded provider payloads.

    JSON null, for an object or any of its fields, reads as the zero value,
    so the field default applies. Consumed scalars are strict: a string
    where a number is expected is a decode error, not a conversion.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def null_as_default(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class WeatherCondition(OpenWeatherModel):
    """Weather condition entry from OpenWeatherMap."""

    description: str = Field(default="", strict=True)


class WeatherAlert(OpenWeatherModel):
    """National weather alert from OpenWeatherMap."""

    event: str = Field(default="", strict=True)


class CurrentConditions(OpenWeatherModel):
    """The `current` block of a One Call response."""

    feels_like: float = Field(default=0.0, strict=True)
    weather: list[WeatherCondition] = Field(default_factory=list)


class UpstreamWeatherResponse(OpenWeatherModel):
    """Subset of the OpenWeatherMap One Call response that the gateway uses.

    Every field has a zero default so provider error bodies such as
    ``{"cod": 401, "message": "Invalid API key"}`` decode cleanly and the
    status code decides what happens next.
    """

    current: CurrentConditions = Field(default_factory=CurrentConditions)
    alerts: list[WeatherAlert] = Field(default_factory=list)
    message: str = Field(default="", strict=True)


class TemperatureBucket(str, Enum):
    """Coarse feels-like temperature label (Fahrenheit thresholds)."""

    COLD = "cold"
    MODERATE = "moderate"
    HOT = "hot"


# Lower bounds of MODERATE and HOT; a value on a threshold belongs to the upper bucket
TEMPERATURE_THRESHOLDS = [65.0, 80.0]
TEMPERATURE_BUCKETS = [TemperatureBucket.COLD, TemperatureBucket.MODERATE, TemperatureBucket.HOT]


def classify_temperature(feels_like: float) -> TemperatureBucket:
    """Map a feels-like temperature in °F to its bucket.

    < 65 is cold, 65 up to (not including) 80 is moderate, 80 and above is hot.
    """
    return TEMPERATURE_BUCKETS[bisect.bisect_right(TEMPERATURE_THRESHOLDS, feels_like)]


class WeatherSummary(BaseModel):
    """Simplified weather response returned by the gateway."""

    alerts: list[str]
    conditions: list[str]
    temperature: TemperatureBucket

    @classmethod
    def from_openweather(cls, data: UpstreamWeatherResponse) -> "WeatherSummary":
        """Create WeatherSummary from OpenWeatherMap data.

        Alert events and condition descriptions keep the provider's order,
        one entry per upstream item.

        Args:
            data: Decoded One Call response

        Returns:
            WeatherSummary with alerts, conditions and temperature bucket
        """
        return cls(
            alerts=[alert.event for alert in data.alerts],
            conditions=[condition.description for condition in data.current.weather],
            temperature=classify_temperature(data.current.feels_like),
        )
