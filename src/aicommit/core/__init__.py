"""Core pipeline components.

- prompt_builder: Deterministic chat request from a diff
- completion_client: Single HTTP exchange with the provider
- reconciler: Status and body to candidate messages or a typed error
- selection: Numbered candidate list and user choice
- assistant: Orchestrates one run
"""

from aicommit.core.assistant import CommitAssistant
from aicommit.core.completion_client import CompletionClient, RawResponse
from aicommit.core.prompt_builder import build_chat_request
from aicommit.core.reconciler import extract_candidates, reconcile
from aicommit.core.selection import CandidateSelector, Console

__all__ = [
    "CandidateSelector",
    "CommitAssistant",
    "CompletionClient",
    "Console",
    "RawResponse",
    "build_chat_request",
    "extract_candidates",
    "reconcile",
]
