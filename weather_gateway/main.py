"""Main FastAPI application entry point."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from weather_gateway.config import get_settings
from weather_gateway.core.app_factory import create_app
from weather_gateway.logging_config import get_logger, log_with_context, setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Fails with a ValidationError when API_KEY is missing
settings = get_settings()

# Configure structured logging (console + JSON file, appid redacted)
setup_logging(settings)

logger = get_logger(__name__)

app = create_app(settings)


def run() -> None:
    """Serve the application with uvicorn on the configured address."""
    log_with_context(
        logger,
        "info",
        f"Listening on {settings.addr}",
        host=settings.bind_host,
        port=settings.bind_port,
        event_type="server_listen",
    )
    uvicorn.run(app, host=settings.bind_host, port=settings.bind_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
