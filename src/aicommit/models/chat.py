"""Wire models for the chat-completion API.

Requests are serialized from these models and responses are validated
against them, so a provider that drifts from the expected shape is caught
at the boundary instead of deep inside the pipeline.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Role(StrEnum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message."""

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Body of a chat-completion request."""

    model_config = ConfigDict(frozen=True)

    model: str
    messages: tuple[Message, Message]  # system, then user
    temperature: float
    max_tokens: int
    stream: bool = False


class Choice(BaseModel):
    """One completion alternative."""

    message: Message


class ChatResponse(BaseModel):
    """Successful chat-completion body. Only the first choice is consumed."""

    choices: list[Choice]


class ErrorDetail(BaseModel):
    """Provider error payload."""

    message: str
    error_type: str = Field(alias="type")


class ApiError(BaseModel):
    """Structured error body: ``{"error": {"message", "type"}}``."""

    error: ErrorDetail
