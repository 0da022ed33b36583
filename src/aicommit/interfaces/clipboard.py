"""Abstract interface for the clipboard collaborator."""

from typing import Protocol


class ClipboardProvider(Protocol):
    """Places text on the system clipboard."""

    def copy(self, text: str) -> None:
        """
        Make ``text`` the clipboard contents.

        Raises:
            ClipboardError: If no clipboard tool is available or it fails
        """
        ...
