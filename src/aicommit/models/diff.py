"""Data model for staged changes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Diff:
    """Staged changes as reported by git."""

    text: str  # Raw unified diff
    file_names: tuple[str, ...] = ()  # In git's output order

    @property
    def is_empty(self) -> bool:
        """True when nothing is staged."""
        return not self.file_names
