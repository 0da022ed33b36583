"""Data models and transfer objects."""

from .chat import ApiError, ChatRequest, ChatResponse, Choice, ErrorDetail, Message, Role
from .diff import Diff
from .outcome import RunOutcome

__all__ = [
    # Git models
    "Diff",
    # Chat wire models
    "Role",
    "Message",
    "ChatRequest",
    "Choice",
    "ChatResponse",
    "ErrorDetail",
    "ApiError",
    # Run outcome
    "RunOutcome",
]
