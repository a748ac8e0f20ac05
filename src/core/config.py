"""
Album client settings.

Every value comes from the process environment (or a local .env file) and
has a default, so the client works against the public JSONPlaceholder
endpoint with no configuration at all.

Environment variables:
    ENVIRONMENT            development | testing | ci | production
    DEBUG                  true forces DEBUG logging
    LOG_LEVEL              DEBUG, INFO, WARNING, ERROR or CRITICAL
    ALBUMS_API_BASE_URL    endpoint serving /albums
    ALBUMS_API_TIMEOUT     per-request timeout in seconds

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    api = AlbumsAPI(
        base_url=settings.albums_api_base_url,
        timeout=settings.albums_api_timeout,
    )
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import ALBUMS_API_TIMEOUT_DEFAULT, DEFAULT_ALBUMS_API_BASE_URL
from src.core.enums import Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Flat settings model.

    Precedence: keyword arguments, then environment variables, then .env,
    then the defaults below.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment; selects the log renderer",
    )
    debug: bool = Field(
        default=False,
        description="Log at DEBUG regardless of log_level",
    )
    log_level: str = Field(
        default="INFO",
        description="Lowest level emitted by the console logger",
    )

    app_name: str = Field(default="Album Client", description="Application name")
    app_version: str = Field(default="0.1.0", description="Client version")

    albums_api_base_url: str = Field(
        default=DEFAULT_ALBUMS_API_BASE_URL,
        description="Endpoint serving /albums, without trailing slash",
    )
    albums_api_timeout: float = Field(
        default=ALBUMS_API_TIMEOUT_DEFAULT,
        description="Per-request timeout in seconds",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("albums_api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Require an http(s) URL and drop trailing slashes.

        Raises:
            ValueError: If the scheme is not http or https.
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError("albums_api_base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("albums_api_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("albums_api_timeout must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Accept level names in any case; store them upper-cased.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Load settings once per process.

    Tests call get_settings.cache_clear() after patching the environment.
    """
    return Settings()
