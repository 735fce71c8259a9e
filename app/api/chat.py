"""SSE Chat relay API endpoint."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import StreamingResponse
from pydantic import ValidationError

from app.core.exceptions import ChatRelayException, InvalidInputError, UpstreamError
from app.dependencies.get_chat_service import get_chat_service
from app.models.chat import ChatRequest, ErrorResponse, normalize_messages
from app.services.chat import ChatService, sse_stream

router = APIRouter(tags=["chat"], prefix="/api")

SSE_HEADERS = {
    "Content-Type": "text/event-stream",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


async def parse_chat_request(request: Request) -> ChatRequest:
    """
    Read and validate the request body.

    Raises:
        InvalidInputError: If the body is not JSON or `messages` is missing or malformed
    """
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidInputError(
            "Invalid messages format", details={"reason": str(e)}
        ) from e

    if not isinstance(body, dict):
        raise InvalidInputError("Invalid messages format")

    try:
        return ChatRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidInputError(
            "Invalid messages format", details={"errors": e.errors()}
        ) from e


@router.post(
    "/chat",
    status_code=status.HTTP_200_OK,
    summary="Relay a conversation to the model and stream the reply via Server-Sent Events",
    responses={500: {"model": ErrorResponse, "description": "Request failed before streaming"}},
)
async def stream_chat(
    request: Request,
    chat_service: ChatService = Depends(get_chat_service),
):
    """
    Stream a chat completion using Server-Sent Events (SSE).

    This endpoint:
    1. Accepts `{"messages": [{"role": ..., "content": ...}, ...]}`
    2. Drops blank messages, coerces roles to `user`/`assistant` and trims content
    3. Forwards the conversation with the fixed system prompt to the model
    4. Streams each text fragment as `data: {"content": "..."}`
    5. Emits a final `data: {"content": "[DONE]"}` event to signal completion

    A failure after streaming has started is sent as a single
    `data: {"error": "..."}` event and the stream is closed.

    Returns:
        StreamingResponse: SSE stream with media type `text/event-stream`

    Raises:
        ChatRelayException: On failures before streaming begins, rendered as a
        500 JSON error by the application exception handler.
    """
    try:
        chat_request = await parse_chat_request(request)
        messages = normalize_messages(chat_request.messages)
        fragments = await chat_service.open_stream(messages)
    except ChatRelayException:
        raise
    except Exception as e:
        raise UpstreamError(str(e) or "Unknown error") from e

    return StreamingResponse(
        sse_stream(fragments),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
