"""Application configuration and settings management."""

from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="CANSHIP_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Canadian Shipping Estimator API"
    api_prefix: str = "/api"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    geocoder_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="Base URL of the Nominatim-compatible geocoding service.",
    )
    geocoder_user_agent: str = Field(
        default="canship-estimator/0.1 (shipping-estimator)",
        description="User-Agent sent to the geocoding service (required by the Nominatim usage policy).",
    )
    geocoder_timeout_seconds: float = Field(default=10.0, gt=0.0)
    geocoder_result_limit: int = Field(default=8, ge=1, le=50)
    geocoder_country_code: str = Field(default="ca", description="ISO country filter passed as countrycodes.")
    geocoder_country_name: str = Field(default="Canada", description="Qualifier appended to every search query.")
    debounce_seconds: float = Field(
        default=0.3,
        ge=0.0,
        description="Quiet period before a keystroke-driven lookup is issued.",
    )
    min_query_length: int = Field(default=2, ge=1)
    route_leg_weight: float = Field(
        default=50.0,
        gt=0.0,
        description="Average shipment weight used to price each leg of a multi-stop route.",
    )
    route_leg_tier: Literal["standard", "express", "overnight"] = "standard"
    max_sessions: int = Field(default=1000, ge=1)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("geocoder_base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


settings = Settings()
