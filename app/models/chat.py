"""Chat models for the SSE relay endpoint."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class IncomingMessage(BaseModel):
    """A message as sent by the browser, before normalization."""

    model_config = ConfigDict(extra="ignore")

    role: Any = Field(
        default=None,
        description='Speaker of the message. Anything other than "user" is treated as "assistant".',
    )
    content: Optional[str] = Field(
        default=None,
        description="Message text. Empty or whitespace-only messages are dropped.",
    )


class ChatRequest(BaseModel):
    """Request model for a streamed chat completion."""

    model_config = ConfigDict(extra="ignore")

    messages: List[IncomingMessage] = Field(
        ..., description="Conversation history, oldest first"
    )


class Message(BaseModel):
    """A normalized conversation message forwarded upstream."""

    role: Literal["user", "assistant"]
    content: str = Field(..., min_length=1)


class ErrorResponse(BaseModel):
    """Error body returned when a request fails before streaming starts."""

    error: str = "Error processing your request"
    details: str


def normalize_messages(messages: List[IncomingMessage]) -> List[Message]:
    """
    Drop blank messages, coerce roles and trim content.

    Args:
        messages: Messages from the request body, in conversation order

    Returns:
        List[Message]: Messages safe to send upstream, order preserved
    """
    normalized = []
    for msg in messages:
        if msg.content is None or not msg.content.strip():
            continue
        normalized.append(
            Message(
                role="user" if msg.role == "user" else "assistant",
                content=msg.content.strip(),
            )
        )
    return normalized
