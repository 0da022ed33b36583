"""Configuration loader: JSON file, environment overrides, active provider."""

import json
from importlib import resources
from pathlib import Path

import structlog
from pydantic import ValidationError
from pydantic_settings import SettingsError

from ..utils.errors import ConfigMalformed, ConfigMissing, ProviderNotFound
from ..utils.logging import LogEventNames
from .schema import AppConfig, ProviderConfig

log = structlog.get_logger()

CONFIG_DIR_NAME = ".aicommit"
CONFIG_FILE_NAME = "config.json"

# Read once at import; never resolved against the working directory.
DEFAULT_CONFIG_TEMPLATE = (
    (resources.files("aicommit") / "stubs" / CONFIG_FILE_NAME).read_text(encoding="utf-8")
)


def default_config_path() -> Path:
    """Return ``~/.aicommit/config.json``."""
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def copy_default_config(path: Path) -> Path:
    """
    Write the bundled default configuration to ``path``.

    Parent directories are created as needed and an existing file is
    overwritten.

    Args:
        path: Destination of the configuration file

    Returns:
        The path written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    log.info(LogEventNames.CONFIG_BOOTSTRAPPED, path=str(path))
    return path


def load_config(path: Path) -> AppConfig:
    """
    Load configuration from a JSON file with ``AICOMMIT_*`` overrides.

    Args:
        path: Path to JSON configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigMissing: If the config file doesn't exist
        ConfigMalformed: If the file is not JSON or doesn't match the schema
        ProviderNotFound: If default_provider names no configured provider
    """
    if not path.exists():
        raise ConfigMissing(path)

    log.debug(LogEventNames.CONFIG_LOADING, path=str(path))

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigMalformed(path, str(e)) from e

    if not isinstance(raw, dict):
        raise ConfigMalformed(path, "top level must be a JSON object")

    try:
        config = AppConfig(**raw)
    except (ValidationError, SettingsError) as e:
        raise ConfigMalformed(path, str(e)) from e

    validate_config(config)

    log.debug(LogEventNames.CONFIG_LOADED, providers=[p.name for p in config.providers])
    return config


def ensure_config(path: Path) -> AppConfig:
    """Load the configuration, bootstrapping the default template if it is absent."""
    if not path.exists():
        try:
            copy_default_config(path)
        except OSError as e:
            log.error("config_bootstrap_failed", path=str(path), error=str(e))
            raise ConfigMissing(path) from e
    return load_config(path)


def validate_config(config: AppConfig) -> None:
    """
    Perform cross-field validation.

    Raises:
        ProviderNotFound: If default_provider names no configured provider
    """
    resolve_active_provider(config)


def resolve_active_provider(config: AppConfig) -> ProviderConfig:
    """
    Return the provider named by ``default_provider`` (case-insensitive).

    Raises:
        ProviderNotFound: If no configured provider has that name
    """
    wanted = config.default_provider.strip().lower()
    for provider in config.providers:
        if provider.name.lower() == wanted:
            return provider

    raise ProviderNotFound(config.default_provider, [p.name for p in config.providers])


def has_usable_credential(provider: ProviderConfig) -> bool:
    """True iff the provider's API key is non-empty."""
    return provider.has_usable_credential
