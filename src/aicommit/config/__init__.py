"""Configuration loading and provider resolution."""

from .loader import (
    copy_default_config,
    default_config_path,
    ensure_config,
    has_usable_credential,
    load_config,
    resolve_active_provider,
)
from .schema import AppConfig, LoggingConfig, ProviderConfig, RetryConfig

__all__ = [
    # Loader
    "copy_default_config",
    "default_config_path",
    "ensure_config",
    "has_usable_credential",
    "load_config",
    "resolve_active_provider",
    # Schema
    "AppConfig",
    "LoggingConfig",
    "ProviderConfig",
    "RetryConfig",
]
