"""Interactive selection of a candidate commit message."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from typing import TextIO

from aicommit.core.prompt_builder import COMMIT_TYPE_NAMES

_TYPE_PREFIX = re.compile(rf"^({'|'.join(COMMIT_TYPE_NAMES)})(\([^)]*\))?!?:")

GREEN = "\x1b[92m"
YELLOW = "\x1b[93m"
CYAN = "\x1b[96m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class Console:
    """Writes user-facing lines, coloured only when the stream is a terminal."""

    def __init__(self, stream: TextIO | None = None, color: bool | None = None) -> None:
        self._stream = stream or sys.stdout
        self._color = self._stream.isatty() if color is None else color

    def paint(self, text: str, code: str) -> str:
        return f"{code}{text}{RESET}" if self._color else text

    def print(self, text: str = "") -> None:
        print(text, file=self._stream)

    def success(self, text: str) -> None:
        self.print(self.paint(text, GREEN))

    def warn(self, text: str) -> None:
        self.print(self.paint(text, YELLOW))

    def highlight_type(self, message: str) -> str:
        """Bold the conventional-commit type prefix, if any."""
        match = _TYPE_PREFIX.match(message)
        if not match:
            return message
        return self.paint(match.group(0), BOLD) + message[match.end() :]


class CandidateSelector:
    """Lists candidates numbered from 1 and reads the user's choice.

    Input is read without a timeout; an empty line means "skip".
    """

    PROMPT = "\nSelect a commit message by number (or press Enter to skip):"

    def __init__(
        self,
        console: Console | None = None,
        read_line: Callable[[], str] = input,
    ) -> None:
        self._console = console or Console()
        self._read_line = read_line

    def show(self, candidates: list[str]) -> None:
        """Print the numbered candidate list."""
        self._console.print("\nGenerated commit messages:")
        for number, message in enumerate(candidates, 1):
            label = self._console.paint(f"{number}.", CYAN)
            self._console.print(f"{label} {self._console.highlight_type(message)}")

    def choose(self, candidates: list[str]) -> str | None:
        """Show ``candidates`` and return the chosen one, or None if nothing was chosen."""
        self.show(candidates)
        self._console.print(self.PROMPT)

        try:
            raw = self._read_line()
        except EOFError:
            raw = ""
        choice = raw.strip()

        if not choice:
            self._console.print("No commit message selected.")
            return None

        if not (choice.isascii() and choice.isdigit()):
            self._console.warn("Invalid input.")
            return None

        index = int(choice)
        if not 1 <= index <= len(candidates):
            self._console.warn("Invalid selection.")
            return None

        return candidates[index - 1]
