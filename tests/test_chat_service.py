import asyncio

import pytest
from langchain_core.messages import AIMessageChunk

from app.core.exceptions import UpstreamError
from app.models.chat import Message
from app.services.chat import ChatService, chunk_text, format_sse_event, sse_stream

from conftest import FakeChatModel, FakeModelService


async def _collect(iterator):
    return [item async for item in iterator]


async def _fragments(*items, error=None):
    for item in items:
        yield item
    if error is not None:
        raise error


def test_format_sse_event_is_compact_json():
    assert format_sse_event({"content": "Hi"}) == b'data: {"content":"Hi"}\n\n'


def test_format_sse_event_keeps_unicode_and_escapes_newlines():
    frame = format_sse_event({"content": "Café\nMenu"})

    assert frame == 'data: {"content":"Café\\nMenu"}\n\n'.encode("utf-8")


def test_sse_stream_success():
    frames = asyncio.run(_collect(sse_stream(_fragments("Hello", " world"))))

    assert frames == [
        b'data: {"content":"Hello"}\n\n',
        b'data: {"content":" world"}\n\n',
        b'data: {"content":"[DONE]"}\n\n',
    ]


def test_sse_stream_error_replaces_done_marker():
    fragments = _fragments("Hello", error=ConnectionError("overloaded_error"))

    frames = asyncio.run(_collect(sse_stream(fragments)))

    assert frames == [
        b'data: {"content":"Hello"}\n\n',
        b'data: {"error":"overloaded_error"}\n\n',
    ]


def test_sse_stream_error_without_message():
    frames = asyncio.run(_collect(sse_stream(_fragments(error=RuntimeError()))))

    assert frames == [b'data: {"error":"Unknown streaming error"}\n\n']


def test_chunk_text_handles_content_blocks():
    chunk = AIMessageChunk(
        content=[
            {"type": "text", "text": "Head", "index": 0},
            {"type": "tool_use", "id": "toolu_1", "index": 1},
            {"type": "text", "text": "line", "index": 0},
        ]
    )

    assert chunk_text(chunk) == "Headline"
    assert chunk_text(AIMessageChunk(content="")) == ""
    assert chunk_text(object()) == ""


def test_build_prompt_maps_roles():
    service = ChatService(FakeModelService(FakeChatModel([])), system_prompt="Be brief.")

    prompt = service.build_prompt(
        [
            Message(role="user", content="Tagline?"),
            Message(role="assistant", content="For what?"),
        ]
    )

    assert [(m.type, m.content) for m in prompt] == [
        ("system", "Be brief."),
        ("human", "Tagline?"),
        ("ai", "For what?"),
    ]


def test_open_stream_skips_empty_chunks():
    model = FakeChatModel(["", "Hello", "", " world"])
    service = ChatService(FakeModelService(model))

    async def run():
        fragments = await service.open_stream([Message(role="user", content="Hi")])
        return await _collect(fragments)

    assert asyncio.run(run()) == ["Hello", " world"]
    assert model.closed


def test_open_stream_wraps_setup_failure():
    model = FakeChatModel([], error=TimeoutError("connect timeout"))
    service = ChatService(FakeModelService(model))

    with pytest.raises(UpstreamError, match="connect timeout"):
        asyncio.run(service.open_stream([Message(role="user", content="Hi")]))


def test_closing_relay_closes_upstream():
    model = FakeChatModel(["one", "two", "three"])
    service = ChatService(FakeModelService(model))

    async def run():
        fragments = await service.open_stream([Message(role="user", content="Hi")])
        first = await fragments.__anext__()
        await fragments.aclose()
        return first

    assert asyncio.run(run()) == "one"
    assert model.closed


def test_closing_sse_stream_closes_upstream():
    model = FakeChatModel(["one", "two", "three"])
    service = ChatService(FakeModelService(model))

    async def run():
        fragments = await service.open_stream([Message(role="user", content="Hi")])
        frames = sse_stream(fragments)
        first = await frames.__anext__()
        await frames.aclose()
        return first

    assert asyncio.run(run()) == b'data: {"content":"one"}\n\n'
    assert model.closed
