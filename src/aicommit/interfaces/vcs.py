"""Abstract interface for the version-control collaborator."""

from typing import Protocol

from ..models.diff import Diff


class VCSProvider(Protocol):
    """Read-only queries against the working tree.

    The pipeline never runs version-control commands itself; it asks an
    implementation of this protocol (``GitCli``, or a fake in tests).
    """

    async def is_inside_repository(self) -> bool:
        """
        Check whether the current directory is inside a work tree.

        Returns:
            True if inside a repository, False otherwise

        Raises:
            GitError: If the tool cannot be run at all
        """
        ...

    async def staged_diff(self) -> Diff:
        """
        Return the staged changes.

        Equivalent to ``git diff --cached --diff-algorithm=minimal`` for the
        text and the same with ``--name-only`` for the file list.

        Returns:
            Diff with raw text and changed paths in the tool's order

        Raises:
            GitError: If the tool cannot be run at all
        """
        ...
