"""HTTP exchange with a chat-completion provider.

One POST per call, no retries here. The result is either a
:class:`RawResponse` (any HTTP status) or a raised
:class:`~aicommit.utils.errors.TransportError` /
:class:`~aicommit.utils.errors.SerializationError`. Interpreting the status
and body is the reconciler's job.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import httpx
import structlog
from pydantic_core import PydanticSerializationError

from aicommit.config.schema import ProviderConfig
from aicommit.models.chat import ChatRequest
from aicommit.utils.errors import SerializationError, TransportError
from aicommit.utils.logging import LogEventNames

log = structlog.get_logger()

REQUEST_TIMEOUT = 30.0

# Sent when the key cannot be carried in a header, so the server rejects it.
INVALID_BEARER = "Bearer invalid"


@dataclass(frozen=True)
class RawResponse:
    """Status and raw body text of a provider response."""

    status_code: int
    body: str


def bearer_header(api_key: str) -> str:
    """Return ``Bearer <api_key>``, or :data:`INVALID_BEARER` if it is not a valid header value."""
    value = f"Bearer {api_key}"
    try:
        value.encode("ascii")
    except UnicodeEncodeError:
        log.warning(LogEventNames.INVALID_BEARER_FALLBACK, reason="non-ascii api key")
        return INVALID_BEARER

    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        log.warning(LogEventNames.INVALID_BEARER_FALLBACK, reason="control character in api key")
        return INVALID_BEARER

    return value


def build_headers(provider: ProviderConfig) -> dict[str, str]:
    """Authorization and content-type headers for ``provider``."""
    return {
        "Authorization": bearer_header(provider.api_key),
        "Content-Type": "application/json",
    }


def serialize_request(request: ChatRequest) -> str:
    """Serialize ``request`` to a JSON string.

    Raises:
        SerializationError: If the model cannot be dumped.
    """
    try:
        return request.model_dump_json()
    except (PydanticSerializationError, ValueError, TypeError) as e:
        raise SerializationError(str(e)) from e


def create_http_client(timeout: float = REQUEST_TIMEOUT) -> httpx.AsyncClient:
    """Build the HTTP client, degrading to library defaults if construction fails."""
    try:
        return httpx.AsyncClient(timeout=httpx.Timeout(timeout))
    except (ValueError, TypeError, OSError) as e:
        log.warning(LogEventNames.HTTP_CLIENT_FALLBACK, error=str(e))
        return httpx.AsyncClient()


class CompletionClient:
    """Sends chat-completion requests.

    Example:
        async with CompletionClient() as client:
            raw = await client.send_completion(request, provider)
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        request_timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Client to send with. If None, one is created with the
                fixed 30 second timeout.
            request_timeout: Ceiling for the whole exchange, from send until the
                body has been read.
        """
        self._http = http_client if http_client is not None else create_http_client(request_timeout)
        self._request_timeout = request_timeout

    async def __aenter__(self) -> CompletionClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def send_completion(self, request: ChatRequest, provider: ProviderConfig) -> RawResponse:
        """POST ``request`` to ``provider.endpoint``.

        Args:
            request: Chat request to send.
            provider: Active provider (endpoint and credential).

        Returns:
            The status code and full response body text.

        Raises:
            SerializationError: If the request cannot be serialized.
            TransportError: If sending fails (phase ``send``) or the body
                cannot be read (phase ``read``).
        """
        body = serialize_request(request)
        headers = build_headers(provider)

        log.info(
            LogEventNames.LLM_REQUEST_START,
            provider=provider.name,
            endpoint=provider.endpoint,
            model=request.model,
        )

        try:
            async with asyncio.timeout(self._request_timeout):
                async with self._http.stream(
                    "POST", provider.endpoint, content=body, headers=headers
                ) as response:
                    try:
                        await response.aread()
                        text = response.text
                    except (httpx.HTTPError, UnicodeDecodeError) as e:
                        log.error(
                            LogEventNames.LLM_REQUEST_ERROR,
                            phase=TransportError.READ,
                            error=str(e),
                        )
                        raise TransportError(
                            TransportError.READ, str(e) or type(e).__name__
                        ) from e
        except TimeoutError as e:
            detail = f"request timed out after {self._request_timeout:g}s"
            log.error(LogEventNames.LLM_REQUEST_ERROR, phase=TransportError.SEND, error=detail)
            raise TransportError(TransportError.SEND, detail) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.error(LogEventNames.LLM_REQUEST_ERROR, phase=TransportError.SEND, error=str(e))
            raise TransportError(TransportError.SEND, str(e) or type(e).__name__) from e

        log.info(
            LogEventNames.LLM_REQUEST_COMPLETE,
            status_code=response.status_code,
            body_length=len(text),
        )
        return RawResponse(status_code=response.status_code, body=text)
