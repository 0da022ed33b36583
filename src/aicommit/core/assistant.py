"""Pipeline orchestrator.

Runs one invocation end to end, strictly in sequence: credential check,
repository check, staged diff, prompt, a single completion request,
reconciliation, selection, clipboard. Configuration is passed in
explicitly; nothing is looked up from global state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from aicommit.config.loader import has_usable_credential
from aicommit.core.completion_client import CompletionClient, RawResponse
from aicommit.core.prompt_builder import build_chat_request
from aicommit.core.reconciler import reconcile
from aicommit.core.selection import CandidateSelector, Console
from aicommit.models.outcome import RunOutcome
from aicommit.utils.async_helpers import create_retry
from aicommit.utils.errors import ClipboardError, CredentialMissing
from aicommit.utils.logging import LogEventNames

if TYPE_CHECKING:
    from aicommit.adapters.llm.local_server import LocalServerHook
    from aicommit.config.schema import ProviderConfig, RetryConfig
    from aicommit.interfaces.clipboard import ClipboardProvider
    from aicommit.interfaces.vcs import VCSProvider
    from aicommit.models.chat import ChatRequest

log = structlog.get_logger()


class CommitAssistant:
    """Coordinates the collaborators for one run.

    Example:
        assistant = CommitAssistant(provider, retry, GitCli(), client, SystemClipboard())
        outcome = await assistant.run()
    """

    def __init__(
        self,
        provider: ProviderConfig,
        retry: RetryConfig,
        vcs: VCSProvider,
        client: CompletionClient,
        clipboard: ClipboardProvider,
        selector: CandidateSelector | None = None,
        console: Console | None = None,
        hook: LocalServerHook | None = None,
    ) -> None:
        """Initialize the assistant.

        Args:
            provider: Active provider, already resolved from configuration
            retry: Retry policy for the completion request
            vcs: Version-control collaborator
            client: Completion client
            clipboard: Clipboard collaborator
            selector: Selection surface (defaults to stdin/stdout)
            console: User-facing output
            hook: Optional provider preparation (local-server autostart)
        """
        self._provider = provider
        self._retry = retry
        self._vcs = vcs
        self._client = client
        self._clipboard = clipboard
        self._console = console or Console()
        self._selector = selector or CandidateSelector(self._console)
        self._hook = hook

    async def _send(self, request: ChatRequest) -> RawResponse:
        @create_retry(
            max_attempts=self._retry.max_attempts,
            min_wait=self._retry.initial_delay,
            max_wait=self._retry.max_delay,
        )
        async def send() -> RawResponse:
            return await self._client.send_completion(request, self._provider)

        return await send()

    async def generate(self) -> list[str] | RunOutcome:
        """Run the pipeline up to reconciliation.

        Returns:
            Candidate messages, or the outcome that ended the run early

        Raises:
            CredentialMissing: If the active provider has no API key
            GitError: If git cannot be queried
            CompletionError: If the request cannot be sent
            ReconcileError: If the response carries no usable messages
        """
        if not has_usable_credential(self._provider):
            raise CredentialMissing(self._provider.name)

        if not await self._vcs.is_inside_repository():
            self._console.warn("This directory is not a Git repository.")
            return RunOutcome.NOT_A_REPOSITORY

        diff = await self._vcs.staged_diff()
        if diff.is_empty:
            self._console.warn("No staged changes detected.")
            return RunOutcome.NO_STAGED_CHANGES

        self._console.print("Staged files:")
        for file_name in diff.file_names:
            self._console.print(file_name)

        if self._hook is not None:
            await self._hook.prepare(self._provider)

        request = build_chat_request(diff, self._provider)
        raw = await self._send(request)
        candidates = reconcile(raw.status_code, raw.body)

        if not candidates:
            self._console.warn("No commit messages generated.")
            return RunOutcome.NO_CANDIDATES

        return candidates

    async def run(self) -> RunOutcome:
        """Run the whole pipeline, including selection and clipboard.

        Returns:
            How the run ended

        Raises:
            Same as :meth:`generate`.
        """
        result = await self.generate()
        if isinstance(result, RunOutcome):
            return result

        selected = self._selector.choose(result)
        if selected is None:
            return RunOutcome.NOT_SELECTED

        try:
            self._clipboard.copy(selected)
        except ClipboardError as e:
            log.warning(LogEventNames.CLIPBOARD_FAILED, error=str(e))
            self._console.warn(f"Could not copy to clipboard: {e}")
            self._console.print(selected)
            return RunOutcome.CLIPBOARD_FAILED

        self._console.success("Selected commit message copied to clipboard:")
        self._console.print(selected)
        return RunOutcome.COPIED
