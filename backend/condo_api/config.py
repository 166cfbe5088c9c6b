"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - API_KEY is required and non-empty; Settings() raises ValidationError otherwise
    - get_settings() is cached (lru_cache): a single instance per process

Design Decisions:
    - Defaults for every non-secret setting: the service starts with only API_KEY set
    - List settings accept JSON arrays in the environment (pydantic-settings behaviour)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8",
        case_sensitive=False, extra="ignore",
    )

    # Request gate
    api_key: str = Field(min_length=1)
    protect_mutations: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_headers: list[str] = ["Content-Type", "X-API-Key"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
