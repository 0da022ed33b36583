"""Tests for protocol interfaces."""

import io

import pytest

from aicommit.adapters.clipboard.system import SystemClipboard
from aicommit.adapters.vcs.git import GitCli
from aicommit.config.schema import ProviderConfig, RetryConfig
from aicommit.core.assistant import CommitAssistant
from aicommit.core.completion_client import RawResponse
from aicommit.core.selection import CandidateSelector, Console
from aicommit.interfaces.clipboard import ClipboardProvider
from aicommit.interfaces.vcs import VCSProvider
from aicommit.models.diff import Diff
from aicommit.models.outcome import RunOutcome


class MockVCSProvider:
    """Mock implementation of VCSProvider for testing protocol compliance."""

    def __init__(self, diff: Diff) -> None:
        self.diff = diff

    async def is_inside_repository(self) -> bool:
        """Always inside a work tree."""
        return True

    async def staged_diff(self) -> Diff:
        """Return the canned diff."""
        return self.diff


class MockClipboardProvider:
    """Mock implementation of ClipboardProvider for testing protocol compliance."""

    def __init__(self) -> None:
        self.contents: str | None = None

    def copy(self, text: str) -> None:
        """Remember the copied text."""
        self.contents = text


class MockCompletionClient:
    """Answers every request with a fixed body."""

    async def send_completion(self, request, provider) -> RawResponse:
        body = (
            '{"choices": [{"message": {"role": "assistant", '
            '"content": "feat: add parser\\nfix: handle empty input"}}]}'
        )
        return RawResponse(status_code=200, body=body)


def test_mock_vcs_provider_is_compatible(sample_diff: Diff) -> None:
    """Test that the mock satisfies VCSProvider."""
    provider: VCSProvider = MockVCSProvider(sample_diff)
    assert provider is not None


def test_mock_clipboard_provider_is_compatible() -> None:
    """Test that the mock satisfies ClipboardProvider."""
    provider: ClipboardProvider = MockClipboardProvider()
    assert provider is not None


def test_adapters_are_compatible() -> None:
    """Test that the shipped adapters satisfy the protocols."""
    vcs: VCSProvider = GitCli(git_path="/usr/bin/git")
    clipboard: ClipboardProvider = SystemClipboard(["pbcopy"])
    assert vcs is not None
    assert clipboard is not None


@pytest.mark.asyncio
async def test_assistant_runs_against_protocols(
    sample_diff: Diff, provider: ProviderConfig
) -> None:
    """Test a full run with protocol-only collaborators."""
    clipboard = MockClipboardProvider()
    console = Console(io.StringIO(), color=False)
    assistant = CommitAssistant(
        provider=provider,
        retry=RetryConfig(),
        vcs=MockVCSProvider(sample_diff),
        client=MockCompletionClient(),  # type: ignore[arg-type]
        clipboard=clipboard,
        selector=CandidateSelector(console, read_line=lambda: "2"),
        console=console,
    )

    assert await assistant.run() == RunOutcome.COPIED
    assert clipboard.contents == "fix: handle empty input"
