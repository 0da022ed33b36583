"""Turns a provider's status and body into candidate commit messages.

Pure text and structure transformation: the same input always yields the
same candidates or the same error, whichever provider answered.
"""

from __future__ import annotations

import structlog
from pydantic import ValidationError

from aicommit.models.chat import ApiError, ChatResponse
from aicommit.utils.errors import (
    EmptyCompletion,
    HttpError,
    MalformedSuccess,
    ProviderError,
)
from aicommit.utils.logging import LogEventNames

log = structlog.get_logger()


def is_success_status(status_code: int) -> bool:
    """True for 2xx statuses."""
    return 200 <= status_code < 300


def extract_candidates(content: str) -> list[str]:
    """Split model output into trimmed, non-empty lines, keeping their order."""
    return [line.strip() for line in content.splitlines() if line.strip()]


def reconcile(status_code: int, body: str) -> list[str]:
    """Reconcile a raw response into candidate commit messages.

    Args:
        status_code: HTTP status of the response.
        body: Response body text, unmodified.

    Returns:
        Candidate lines from the first choice, in model order.

    Raises:
        MalformedSuccess: 2xx body that is not a chat completion.
        EmptyCompletion: 2xx completion without choices.
        ProviderError: non-2xx body with a structured ``error`` object.
        HttpError: non-2xx body of any other shape.
    """
    if is_success_status(status_code):
        try:
            response = ChatResponse.model_validate_json(body)
        except ValidationError as e:
            log.warning(LogEventNames.RESPONSE_REJECTED, reason="malformed_success")
            raise MalformedSuccess(_first_error(e), body) from e

        if not response.choices:
            log.warning(LogEventNames.RESPONSE_REJECTED, reason="empty_completion")
            raise EmptyCompletion()

        candidates = extract_candidates(response.choices[0].message.content)
        log.debug(LogEventNames.RESPONSE_RECONCILED, candidates=len(candidates))
        return candidates

    try:
        api_error = ApiError.model_validate_json(body)
    except ValidationError as e:
        log.warning(LogEventNames.RESPONSE_REJECTED, reason="http_error", status_code=status_code)
        raise HttpError(status_code, body) from e

    log.warning(
        LogEventNames.RESPONSE_REJECTED,
        reason="provider_error",
        status_code=status_code,
        error_type=api_error.error.error_type,
    )
    raise ProviderError(api_error.error.error_type, api_error.error.message)


def _first_error(error: ValidationError) -> str:
    """Compact diagnostic: location and message of the first validation error."""
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{location}: {first.get('msg', 'invalid')}"
