from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator
from typing import Any
from pathlib import Path
import os


_DEFAULT_ENV_FILE = str(Path(__file__).resolve().parents[3] / ".env")


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"

    # CORS origins
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    CORS_ALLOW_ALL: bool = False

    # Currency label attached to pricing responses. The engine itself is
    # currency-agnostic; amounts are plain decimals.
    DEFAULT_CURRENCY: str = "USD"

    # Label used for conflicts on bookings whose venue id is missing.
    UNKNOWN_VENUE_LABEL: str = "Unknown venue"

    # Logging / tracing knobs (see core/observability.py)
    LOG_LEVEL: str = "INFO"
    ENABLE_CONSOLE_TRACING: bool = False

    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=os.getenv("ENV_FILE", _DEFAULT_ENV_FILE),
        case_sensitive=True,
    )

    @field_validator("DEFAULT_CURRENCY", mode="before")
    def normalize_currency(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper() or "USD"
        return v

    @field_validator("LOG_LEVEL", "UNKNOWN_VENUE_LABEL", mode="before")
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def allow_all_if_requested(self) -> "Settings":
        if self.CORS_ALLOW_ALL:
            self.CORS_ORIGINS = ["*"]
        return self


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", _DEFAULT_ENV_FILE))


settings = load_settings()
