# app/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Global application configuration.

    Values are loaded from environment variables (and an optional `.env`
    file) at runtime.

    These settings drive:
    - Partner dataset / result endpoints and the shared user key
    - Date sequence selection window
    - Logging
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = "Partner Scheduler"
    APP_ENV: str = Field("local", description="Environment name: local/test/dev/stage/prod")

    API_HOSTNAME: str | None = Field(
        default=None,
        description="Hostname serving both the partner dataset and the result endpoint.",
    )
    DATASET_ENDPOINT: str | None = Field(
        default=None,
        description="Path of the partner dataset endpoint (GET).",
    )
    RESULT_ENDPOINT: str | None = Field(
        default=None,
        description="Path of the countries result endpoint (POST).",
    )
    USERKEY: str | None = Field(
        default=None,
        description="Opaque credential passed through as the `userKey` query parameter.",
    )
    HTTP_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Timeout applied to every outbound HTTP request.",
    )

    SEQUENCE_LOOKBACK: int = Field(
        default=2,
        ge=1,
        description=(
            "Lookback used when choosing a start date. The top "
            "SEQUENCE_LOOKBACK * 2 dates by attendance are considered."
        ),
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ...).",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Cached accessor for application settings.

    Using LRU cache ensures settings are read and validated only once,
    while still being easily importable across the app.
    """
    return Settings()
