"""Chat service relaying upstream model output as Server-Sent Events."""

import asyncio
import json
from typing import Any, AsyncGenerator, AsyncIterator, Dict, List, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from app.core.exceptions import UpstreamError
from app.core.logging import setup_logger
from app.models.chat import Message
from app.prompts.chat import CHAT_SYSTEM_PROMPT
from app.services.model import ModelService

logger = setup_logger(__name__)

DONE_MARKER = "[DONE]"


def format_sse_event(payload: Dict[str, Any]) -> bytes:
    """Frame a JSON payload as a single SSE ``data:`` event."""
    data = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return f"data: {data}\n\n".encode("utf-8")


def chunk_text(chunk: Any) -> str:
    """
    Extract the text carried by one upstream chunk.

    Chat model chunks carry either a plain string or a list of content blocks;
    only ``text`` blocks contribute. Anything else yields an empty string.
    """
    content = getattr(chunk, "content", chunk)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return ""


async def _aclose(iterator: AsyncIterator[Any]) -> None:
    aclose = getattr(iterator, "aclose", None)
    if aclose is not None:
        await aclose()


async def sse_stream(fragments: AsyncIterator[str]) -> AsyncGenerator[bytes, None]:
    """
    Adapt a stream of text fragments into SSE frames.

    Emits one ``{"content": ...}`` frame per fragment in the order received,
    then a ``{"content": "[DONE]"}`` frame. If the fragment stream fails, a
    single ``{"error": ...}`` frame is emitted instead of the done frame and
    the stream ends.

    Args:
        fragments: Lazy, finite, non-restartable sequence of text fragments

    Yields:
        UTF-8 encoded SSE frames
    """
    try:
        async for fragment in fragments:
            yield format_sse_event({"content": fragment})
        yield format_sse_event({"content": DONE_MARKER})
    except asyncio.CancelledError:
        logger.info("Client disconnected from chat stream. Closing upstream stream.")
        raise
    except Exception as e:
        logger.error(f"Streaming error: {e}", exc_info=True)
        yield format_sse_event({"error": str(e) or "Unknown streaming error"})
    finally:
        await _aclose(fragments)


class ChatService:
    """Service to relay a conversation to the upstream model."""

    def __init__(
        self,
        model_service: ModelService,
        system_prompt: str = CHAT_SYSTEM_PROMPT,
    ) -> None:
        self._model_service = model_service
        self._system_prompt = system_prompt

    def build_prompt(self, messages: List[Message]) -> List[BaseMessage]:
        """Prefix the conversation with the system prompt as LangChain messages."""
        prompt: List[BaseMessage] = [SystemMessage(content=self._system_prompt)]
        for msg in messages:
            if msg.role == "user":
                prompt.append(HumanMessage(content=msg.content))
            else:
                prompt.append(AIMessage(content=msg.content))
        return prompt

    async def open_stream(self, messages: List[Message]) -> AsyncIterator[str]:
        """
        Start the upstream stream and return its text fragments.

        The first upstream chunk is awaited here so that connection and
        authentication failures are raised before any response is sent.

        Args:
            messages: Normalized conversation, oldest first

        Returns:
            AsyncIterator[str]: Non-empty text fragments in upstream order

        Raises:
            ConfigurationError: If the upstream credential is missing
            UpstreamError: If the upstream stream cannot be opened
        """
        model = self._model_service.get_model()
        prompt = self.build_prompt(messages)

        logger.info(f"Opening upstream stream with {len(messages)} messages")

        upstream = model.astream(prompt)
        try:
            first = await upstream.__anext__()
        except StopAsyncIteration:
            first = None
        except Exception as e:
            await _aclose(upstream)
            raise UpstreamError(str(e) or "Unknown error") from e

        return self._relay(first, upstream)

    async def _relay(
        self, first: Optional[Any], upstream: AsyncIterator[Any]
    ) -> AsyncGenerator[str, None]:
        try:
            if first is not None:
                text = chunk_text(first)
                if text:
                    yield text
            async for chunk in upstream:
                text = chunk_text(chunk)
                if text:
                    yield text
        finally:
            await _aclose(upstream)
