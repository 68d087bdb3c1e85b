"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from weather_gateway.config import Settings
from weather_gateway.core.app_factory import create_app
from weather_gateway.dependencies import get_weather_source
from weather_gateway.services.weather_service import OpenWeatherMapService


class FakeUpstream:
    """Stand-in for the OpenWeatherMap API behind an httpx.MockTransport.

    Records every request; answers with `payload` as JSON, or raw `content`,
    or raises `error` as a transport failure.
    """

    def __init__(self, payload: dict):
        self.status_code = 200
        self.payload = payload
        self.content: bytes | None = None
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def mock_settings():
    """Settings instance with test values, isolated from the environment's .env file."""
    return Settings(
        api_key="test-weather-key",
        openweather_url="https://owm.test/data/2.5/onecall",
        _env_file=None,
    )


@pytest.fixture
def mock_onecall_response():
    """Trimmed OpenWeatherMap One Call response (units=imperial)."""
    return {
        "lat": 30.4898,
        "lon": -99.7713,
        "timezone": "America/Chicago",
        "timezone_offset": -18000,
        "current": {
            "dt": 1618317040,
            "temp": 71.6,
            "feels_like": 72,
            "pressure": 1019,
            "humidity": 62,
            "weather": [{"id": 804, "main": "Clouds", "description": "overcast clouds", "icon": "04d"}],
        },
        "alerts": [],
    }


@pytest.fixture
def upstream(mock_onecall_response):
    """Fake provider; tweak status_code/payload/content/error per test."""
    return FakeUpstream(mock_onecall_response)


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for tests that only inspect the outgoing call."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def weather_service(upstream, mock_settings):
    """OpenWeatherMapService wired to the fake provider."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
    return OpenWeatherMapService(client, mock_settings)


@pytest.fixture
def app(mock_settings, weather_service):
    """Application with the weather source pointed at the fake provider."""
    application = create_app(mock_settings)
    application.dependency_overrides[get_weather_source] = lambda: weather_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def test_client(app):
    """FastAPI test client (lifespan not started; the source is overridden)."""
    return TestClient(app)
