"""Application configuration, read from the environment (and .env)."""

import os

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from nearby.errors import ConfigurationError

DEFAULT_OVERPASS_URL = "https://overpass-api.de/api/interpreter"


class Settings(BaseModel):
    """Validated runtime settings."""

    overpass_url: str = DEFAULT_OVERPASS_URL
    overpass_timeout: float = Field(default=30.0, gt=0)  # client-side, seconds
    overpass_query_timeout: int = Field(default=25, gt=0)  # [timeout:N] in the query

    # Operating window, in local time at a fixed UTC offset (Uzbekistan, UTC+5)
    utc_offset_hours: int = Field(default=5, ge=-12, le=14)
    open_hour: int = Field(default=7, ge=0, le=23)
    close_hour: int = Field(default=23, ge=1, le=24)

    radius_options: tuple[float, ...] = (2.0, 3.0, 6.0)
    default_radius_km: float = Field(default=2.0, gt=0)
    max_results: int = Field(default=5, ge=1, le=20)

    delivery_url: str | None = None
    log_level: str = "INFO"

    @field_validator("overpass_url")
    @classmethod
    def url_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("OVERPASS_URL must not be empty")
        return value.strip()

    @field_validator("radius_options")
    @classmethod
    def radii_positive(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        if not value:
            raise ValueError("RADIUS_OPTIONS must list at least one radius")
        if any(r <= 0 for r in value):
            raise ValueError("RADIUS_OPTIONS must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown LOG_LEVEL: {value}")
        return value

    @model_validator(mode="after")
    def window_is_ordered(self) -> "Settings":
        if self.open_hour >= self.close_hour:
            raise ValueError("OPEN_HOUR must be earlier than CLOSE_HOUR")
        return self


def _parse_radii(raw: str) -> tuple[float, ...]:
    try:
        return tuple(float(part) for part in raw.split(",") if part.strip())
    except ValueError as e:
        raise ConfigurationError(f"RADIUS_OPTIONS is not a list of numbers: {raw!r}") from e


def load_settings() -> Settings:
    """Build Settings from the environment (call load_dotenv() first for .env).

    Raises ConfigurationError when a value is missing or invalid; callers
    should let it stop the process.
    """
    values = {
        "overpass_url": os.getenv("OVERPASS_URL", DEFAULT_OVERPASS_URL),
        "overpass_timeout": os.getenv("OVERPASS_TIMEOUT", "30"),
        "overpass_query_timeout": os.getenv("OVERPASS_QUERY_TIMEOUT", "25"),
        "utc_offset_hours": os.getenv("UTC_OFFSET_HOURS", "5"),
        "open_hour": os.getenv("OPEN_HOUR", "7"),
        "close_hour": os.getenv("CLOSE_HOUR", "23"),
        "radius_options": _parse_radii(os.getenv("RADIUS_OPTIONS", "2,3,6")),
        "default_radius_km": os.getenv("DEFAULT_RADIUS_KM", "2"),
        "max_results": os.getenv("MAX_RESULTS", "5"),
        "delivery_url": os.getenv("DELIVERY_URL") or None,
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
    }

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError("Invalid configuration", details={"errors": e.errors()}) from e
