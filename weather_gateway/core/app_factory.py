"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from weather_gateway import __version__
from weather_gateway.config import Settings, get_settings
from weather_gateway.core.lifespan import lifespan
from weather_gateway.middleware.error_handlers import register_error_handlers
from weather_gateway.routers import weather_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings instance (defaults to singleton)

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Weather Gateway API",
        description="""
        Reduces OpenWeatherMap current conditions and alerts for a
        coordinate pair to a small summary.

        `GET /weather/?lat=30.489772&lon=-99.771335` returns
        `{"alerts": [], "conditions": ["overcast clouds"], "temperature": "moderate"}`.
        """,
        version=__version__,
        lifespan=lifespan,
    )

    # Read by the lifespan to build the shared client
    app.state.settings = settings

    # Register exception handlers
    register_error_handlers(app)

    app.include_router(weather_router.router, prefix="/weather", tags=["weather"])

    return app
