"""Exception hierarchy for aicommit.

Every failure path raises its own type and renders its own message, so the
CLI can print ``str(error)`` and the user can tell the paths apart.
"""

from __future__ import annotations

from pathlib import Path


class AICommitError(Exception):
    """Base exception for all aicommit errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(AICommitError):
    """Configuration could not be turned into an active provider."""


class ConfigMissing(ConfigError):
    """No configuration file exists at the expected location."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Configuration file not found: {path}. "
            "Run with --copy-default-config to create one."
        )
        self.path = path


class ConfigMalformed(ConfigError):
    """The configuration file is not valid JSON or does not fit the schema."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Could not parse config file {path}: {detail}")
        self.path = path
        self.detail = detail


class ProviderNotFound(ConfigError):
    """``default_provider`` names no entry in ``providers``."""

    def __init__(self, name: str, available: list[str]) -> None:
        listed = ", ".join(available) if available else "none"
        super().__init__(
            f"Default provider '{name}' is not defined in providers (available: {listed})"
        )
        self.name = name
        self.available = available


class CredentialMissing(ConfigError):
    """The active provider has an empty API key."""

    def __init__(self, provider_name: str) -> None:
        super().__init__(
            f"API key for provider '{provider_name}' is not set. "
            "Add it to the config file or export AICOMMIT_PROVIDERS. Aborting..."
        )
        self.provider_name = provider_name


# =============================================================================
# Completion request
# =============================================================================


class CompletionError(AICommitError):
    """The completion request could not be exchanged with the provider."""


class SerializationError(CompletionError):
    """The request body could not be serialized to JSON."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Error while serializing request body: {detail}")
        self.detail = detail


class TransportError(CompletionError):
    """Network-level failure while talking to the provider.

    Attributes:
        phase: ``"send"`` when the request never got a response,
            ``"read"`` when the response body could not be read.
        detail: Underlying diagnostic text.
    """

    SEND = "send"
    READ = "read"

    def __init__(self, phase: str, detail: str) -> None:
        if phase == self.READ:
            message = f"Error while reading response: {detail}"
        else:
            message = f"Error while requesting api: {detail}"
        super().__init__(message)
        self.phase = phase
        self.detail = detail


# =============================================================================
# Response reconciliation
# =============================================================================


class ReconcileError(AICommitError):
    """The provider answered, but not with usable commit messages."""


class MalformedSuccess(ReconcileError):
    """A 2xx body that does not parse as a chat completion."""

    def __init__(self, diagnostic: str, body: str) -> None:
        super().__init__(
            f"Error while deserializing api response: {diagnostic}\nRaw response: {body}"
        )
        self.diagnostic = diagnostic
        self.body = body


class EmptyCompletion(ReconcileError):
    """A valid completion with no choices."""

    def __init__(self) -> None:
        super().__init__("Error no content in response")


class ProviderError(ReconcileError):
    """A non-2xx response carrying a structured provider error."""

    def __init__(self, error_type: str, message: str) -> None:
        super().__init__(f"API Error ({error_type}): {message}")
        self.error_type = error_type
        self.message = message


class HttpError(ReconcileError):
    """A non-2xx response whose body is not a structured error."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"HTTP Error {status}: {body}")
        self.status = status
        self.body = body


# =============================================================================
# Collaborators
# =============================================================================


class GitError(AICommitError):
    """A git query failed to run."""


class ClipboardError(AICommitError):
    """The clipboard could not be written."""


class ProviderStartError(AICommitError):
    """A local provider server could not be started."""
