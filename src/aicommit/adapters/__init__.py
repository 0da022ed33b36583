"""Concrete implementations of collaborator interfaces."""

from .clipboard.system import SystemClipboard
from .llm.local_server import LocalServerHook
from .vcs.git import GitCli

__all__ = [
    "GitCli",
    "LocalServerHook",
    "SystemClipboard",
]
