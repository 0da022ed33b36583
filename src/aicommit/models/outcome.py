"""Outcome of a single run."""

from enum import StrEnum


class RunOutcome(StrEnum):
    """How a run of the assistant ended."""

    NOT_A_REPOSITORY = "not_a_repository"
    NO_STAGED_CHANGES = "no_staged_changes"
    NO_CANDIDATES = "no_candidates"
    NOT_SELECTED = "not_selected"
    COPIED = "copied"
    CLIPBOARD_FAILED = "clipboard_failed"
