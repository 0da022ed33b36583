"""aicommit: commit message suggestions for staged git changes."""

from aicommit._version import __version__

__all__ = ["__version__"]
