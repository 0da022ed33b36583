"""Autostart for providers served from the local machine.

Only providers that set ``autostart_command`` are touched. If nothing
answers at the endpoint's origin, the command is launched detached and the
origin is polled until it answers or ``startup_timeout`` elapses.
"""

from __future__ import annotations

import asyncio
import subprocess
import time
from urllib.parse import urlsplit

import httpx
import structlog

from ...config.schema import ProviderConfig
from ...utils.errors import ProviderStartError
from ...utils.logging import LogEventNames

log = structlog.get_logger()


def endpoint_origin(endpoint: str) -> str:
    """``scheme://host[:port]`` of ``endpoint``."""
    parts = urlsplit(endpoint)
    return f"{parts.scheme}://{parts.netloc}"


class LocalServerHook:
    """Starts a local completion server on demand.

    Example:
        hook = LocalServerHook()
        await hook.prepare(provider)  # no-op unless autostart_command is set
    """

    PING_TIMEOUT = 2.0
    POLL_INTERVAL = 0.5
    DEFAULT_STARTUP_TIMEOUT = 30.0

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        startup_timeout: float = DEFAULT_STARTUP_TIMEOUT,
    ) -> None:
        self._http = http_client
        self._startup_timeout = startup_timeout

    async def _is_up(self, client: httpx.AsyncClient, origin: str) -> bool:
        try:
            await client.get(origin, timeout=self.PING_TIMEOUT)
        except httpx.HTTPError:
            return False
        return True

    def _launch(self, command: list[str]) -> None:
        try:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise ProviderStartError(f"Could not start local server {command[0]}: {e}") from e

    async def prepare(self, provider: ProviderConfig) -> None:
        """Make sure ``provider``'s server is answering before the request goes out.

        Raises:
            ProviderStartError: If the server cannot be launched or never answers.
        """
        if not provider.autostart_command:
            return

        origin = endpoint_origin(provider.endpoint)
        client = self._http or httpx.AsyncClient()
        try:
            if await self._is_up(client, origin):
                return

            log.info(
                LogEventNames.LOCAL_SERVER_STARTING,
                provider=provider.name,
                command=provider.autostart_command,
            )
            self._launch(provider.autostart_command)

            deadline = time.monotonic() + self._startup_timeout
            while time.monotonic() < deadline:
                await asyncio.sleep(self.POLL_INTERVAL)
                if await self._is_up(client, origin):
                    log.info(LogEventNames.LOCAL_SERVER_READY, provider=provider.name)
                    return
        finally:
            if self._http is None:
                await client.aclose()

        raise ProviderStartError(
            f"Local server for provider '{provider.name}' did not answer at {origin} "
            f"within {self._startup_timeout:.0f}s"
        )
