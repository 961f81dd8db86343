import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    countries_api_url: str = Field(
        default="https://restcountries.com/v3.1/all",
        alias="COUNTRIES_API_URL",
        description="Bulk endpoint returning every country record"
    )
    api_base_url: str = Field(
        default="http://localhost:3000",
        alias="COUNTRY_API_BASE_URL",
        description="Base URL of the saved-countries / view-count / profile store"
    )
    http_timeout: float = Field(default=15.0, alias="HTTP_TIMEOUT", gt=0)
    dataset_retry_attempts: int = Field(default=2, alias="DATASET_RETRY_ATTEMPTS", ge=1)
    retry_initial_delay: float = Field(default=0.5, alias="RETRY_INITIAL_DELAY", ge=0)
    offline: bool = Field(
        default=False,
        alias="OFFLINE",
        description="Skip the countries API and use the bundled dataset"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,  # Treat empty strings as not set
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept any case, reject names the logging module doesn't know."""
        level = str(v or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_base_url", "countries_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment once per process.

    Raises:
        ConfigurationError: An environment variable holds an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid configuration: {', '.join(fields)}",
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e
