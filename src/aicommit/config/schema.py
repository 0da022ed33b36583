"""Pydantic models for configuration schema."""

from typing import Literal

import httpx
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class ProviderConfig(BaseModel):
    """A configured remote completion endpoint."""

    name: str
    api_key: str = ""
    endpoint: str
    model: str
    autostart_command: list[str] | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank provider names."""
        if not v.strip():
            raise ValueError("Provider name must not be empty")
        return v.strip()

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Require an http(s) URL that httpx can parse."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Endpoint must be an http(s) URL: {v}")
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"Endpoint is not a valid URL: {v} ({e})") from e
        if not url.host:
            raise ValueError(f"Endpoint has no host: {v}")
        return v

    @property
    def has_usable_credential(self) -> bool:
        """True iff an API key is configured."""
        return bool(self.api_key)


class RetryConfig(BaseModel):
    """Retry policy wrapped around the completion request."""

    max_attempts: int = Field(1, ge=1, le=10)
    initial_delay: float = Field(1.0, ge=0.1, le=10.0)
    max_delay: float = Field(30.0, ge=1.0, le=300.0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"


class AppConfig(BaseSettings):
    """Root configuration: the file contents layered under ``AICOMMIT_*`` variables."""

    providers: list[ProviderConfig]
    default_provider: str
    retry: RetryConfig = RetryConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="AICOMMIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # File values arrive as init kwargs; environment variables take priority.
        return (env_settings, init_settings)


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ProviderConfig",
    "RetryConfig",
]
