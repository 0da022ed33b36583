"""Abstract interfaces for external collaborators."""

from .clipboard import ClipboardProvider
from .vcs import VCSProvider

__all__ = ["ClipboardProvider", "VCSProvider"]
