"""Utility functions and helpers.

- errors: Exception hierarchy
- logging: Structured logging with secret sanitization
- security: Secret redaction
- async_helpers: Retry policy for the completion request
"""

from aicommit.utils.async_helpers import create_retry
from aicommit.utils.errors import (
    AICommitError,
    ClipboardError,
    CompletionError,
    ConfigError,
    ConfigMalformed,
    ConfigMissing,
    CredentialMissing,
    EmptyCompletion,
    GitError,
    HttpError,
    MalformedSuccess,
    ProviderError,
    ProviderNotFound,
    ProviderStartError,
    ReconcileError,
    SerializationError,
    TransportError,
)
from aicommit.utils.logging import LogFormat, LogLevel, configure_logging
from aicommit.utils.security import RedactionError, SecretRedactor

__all__ = [
    # Errors
    "AICommitError",
    "ClipboardError",
    "CompletionError",
    "ConfigError",
    "ConfigMalformed",
    "ConfigMissing",
    "CredentialMissing",
    "EmptyCompletion",
    "GitError",
    "HttpError",
    "MalformedSuccess",
    "ProviderError",
    "ProviderNotFound",
    "ProviderStartError",
    "ReconcileError",
    "SerializationError",
    "TransportError",
    # Logging
    "LogFormat",
    "LogLevel",
    "configure_logging",
    # Security
    "RedactionError",
    "SecretRedactor",
    # Retry
    "create_retry",
]
