"""Clipboard adapter that shells out to the platform's clipboard tool."""

from __future__ import annotations

import shutil
import subprocess
import sys

import structlog

from ...utils.errors import ClipboardError

log = structlog.get_logger()

# Tried in order; the first one found on PATH is used.
LINUX_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


def clipboard_command(platform: str = sys.platform) -> list[str] | None:
    """Return the clipboard command for ``platform``, or None if none is installed."""
    if platform == "win32":
        return ["clip"]
    if platform == "darwin":
        return ["pbcopy"]
    for command in LINUX_COMMANDS:
        if shutil.which(command[0]):
            return list(command)
    return None


class SystemClipboard:
    """ClipboardProvider backed by pbcopy, clip, wl-copy, xclip or xsel."""

    TIMEOUT = 5

    def __init__(self, command: list[str] | None = None) -> None:
        self._command = command

    def copy(self, text: str) -> None:
        """Copy ``text`` to the clipboard.

        Raises:
            ClipboardError: If no tool is available or the tool fails.
        """
        command = self._command or clipboard_command()
        if command is None:
            raise ClipboardError("No clipboard tool found. Install wl-clipboard, xclip or xsel")

        log.debug("clipboard_command", command=command)

        try:
            subprocess.run(
                command,
                input=text.encode("utf-8"),
                check=True,
                timeout=self.TIMEOUT,
            )
        except FileNotFoundError as e:
            raise ClipboardError(f"Clipboard tool not found: {command[0]}") from e
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
            raise ClipboardError(f"Clipboard command failed: {e}") from e
