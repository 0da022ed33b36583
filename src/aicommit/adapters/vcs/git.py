"""Git adapter implementing the VCSProvider protocol.

Runs the git CLI with list-form arguments (never through a shell), a fixed
timeout, and only read-only subcommands.
"""

from __future__ import annotations

import asyncio
import shutil
import subprocess
from dataclasses import dataclass

import structlog

from ...models.diff import Diff
from ...utils.errors import GitError
from ...utils.logging import LogEventNames

log = structlog.get_logger()

STAGED_DIFF_ARGS = ("diff", "--cached", "--diff-algorithm=minimal")


@dataclass
class CommandResult:
    """Result of a git command execution."""

    stdout: str
    stderr: str
    return_code: int
    command: list[str]

    @property
    def success(self) -> bool:
        """Return True if the command succeeded."""
        return self.return_code == 0


class GitCli:
    """Read-only queries against the git working tree of ``cwd``.

    Example:
        git = GitCli()
        if await git.is_inside_repository():
            diff = await git.staged_diff()
    """

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        git_path: str | None = None,
        cwd: str | None = None,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the adapter.

        Args:
            git_path: Path to the git binary. If None, uses PATH.
            cwd: Directory to run git in. If None, the current directory.
            timeout: Timeout for each command in seconds.

        Raises:
            GitError: If git is not found.
        """
        resolved_path = git_path or shutil.which("git")
        if not resolved_path:
            raise GitError("git not found. Please install git and make sure it is on PATH")

        self._git_path: str = resolved_path
        self._cwd = cwd
        self._timeout = timeout

    async def _run_command(self, args: list[str]) -> CommandResult:
        """Run a git command in a worker thread.

        Raises:
            GitError: If the command cannot be started or times out.
        """
        cmd = [self._git_path, *args]
        log.debug(LogEventNames.GIT_COMMAND, command=cmd)

        def run_sync() -> subprocess.CompletedProcess[str]:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
                cwd=self._cwd,
                shell=False,
            )

        try:
            proc = await asyncio.to_thread(run_sync)
        except subprocess.TimeoutExpired as e:
            log.error(LogEventNames.GIT_COMMAND_FAILED, command=cmd, timeout=self._timeout)
            raise GitError(f"git timed out after {self._timeout}s: {' '.join(args)}") from e
        except OSError as e:
            log.error(LogEventNames.GIT_COMMAND_FAILED, command=cmd, error=str(e))
            raise GitError(f"Failed to execute git command: {e}") from e

        return CommandResult(
            stdout=proc.stdout,
            stderr=proc.stderr,
            return_code=proc.returncode,
            command=cmd,
        )

    async def is_inside_repository(self) -> bool:
        """Return True if ``git rev-parse --is-inside-work-tree`` answers ``true``."""
        result = await self._run_command(["rev-parse", "--is-inside-work-tree"])
        if not result.success:
            log.debug(
                LogEventNames.GIT_COMMAND_FAILED,
                command=result.command,
                stderr=result.stderr.strip(),
            )
            return False
        return result.stdout.strip() == "true"

    async def staged_diff(self) -> Diff:
        """Return the staged diff text and the staged file names.

        Raises:
            GitError: If either query fails.
        """
        diff = await self._run_command(list(STAGED_DIFF_ARGS))
        if not diff.success:
            raise GitError(f"Failed to execute git diff command: {diff.stderr.strip()}")

        names = await self._run_command([*STAGED_DIFF_ARGS, "--name-only"])
        if not names.success:
            raise GitError(f"Failed to execute git diff command: {names.stderr.strip()}")

        file_names = tuple(line for line in names.stdout.splitlines() if line)
        return Diff(text=diff.stdout, file_names=file_names)
