"""Application configuration loaded from the environment and .env file."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # weather-gateway/

DEFAULT_OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/onecall"


class Settings(BaseSettings):
    """Application settings with validation.

    The API key is required and will raise a validation error if missing,
    which stops the process at startup. It must be provided via the
    API_KEY environment variable or the .env file.
    """

    # OpenWeatherMap - required
    api_key: str = Field(min_length=1, description="OpenWeatherMap API key (appid)")
    openweather_url: str = Field(
        default=DEFAULT_OPENWEATHER_URL,
        pattern=r"^https?://",
        description="OpenWeatherMap One Call endpoint",
    )

    # Outbound request deadline
    upstream_connect_timeout: float = Field(default=5.0, gt=0, description="Upstream connect timeout in seconds")
    upstream_read_timeout: float = Field(default=10.0, gt=0, description="Upstream read timeout in seconds")

    # Server settings
    addr: str = Field(default=":8080", description="Bind address as host:port (e.g. ':8080', '127.0.0.1:9000')")
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for the rotating JSON log")
    log_to_file: bool = Field(default=True, description="Write JSON logs to log_dir in addition to the console")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_key", mode="after")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Ensure api_key is not whitespace."""
        if not v.strip():
            raise ValueError("api_key must not be empty")
        return v

    @field_validator("addr", mode="after")
    @classmethod
    def validate_addr(cls, v: str) -> str:
        """Ensure addr is host:port with a valid port."""
        v = v.strip()
        host, sep, port = v.rpartition(":")
        if not sep:
            raise ValueError("addr must be in host:port form (e.g. ':8080')")
        if not port.isdigit() or not 1 <= int(port) <= 65535:
            raise ValueError(f"addr has an invalid port: {port!r}")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @property
    def bind_host(self) -> str:
        """Host part of addr; an empty host binds all interfaces."""
        host = self.addr.rpartition(":")[0]
        return host.strip("[]") or "0.0.0.0"  # nosec B104

    @property
    def bind_port(self) -> int:
        return int(self.addr.rpartition(":")[2])


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Read once at startup and handed to the application factory; request
    handlers get their configuration from the objects built in the lifespan.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
