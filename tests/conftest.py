"""Shared fixtures: a stub upstream model injected through FastAPI dependencies."""

import logging
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessageChunk

from app.core.config import Settings, get_settings
from app.dependencies.get_chat_service import get_model_service
from app.main import app


class FakeChatModel:
    """Streams the given fragments, then optionally raises."""

    def __init__(self, fragments: List[str], error: Optional[Exception] = None):
        self.fragments = fragments
        self.error = error
        self.prompts = []
        self.closed = False

    async def astream(self, prompt):
        self.prompts.append(prompt)
        try:
            for fragment in self.fragments:
                yield AIMessageChunk(content=fragment)
            if self.error is not None:
                raise self.error
        finally:
            self.closed = True


class FakeModelService:
    def __init__(self, model: FakeChatModel):
        self.model = model

    def get_model(self):
        return self.model


@pytest.fixture
def fake_model():
    return FakeChatModel(["Hello", " world"])


@pytest.fixture
def test_settings():
    return Settings(ANTHROPIC_API_KEY="sk-ant-test-key")


@pytest.fixture
def client(fake_model, test_settings):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_model_service] = lambda: FakeModelService(fake_model)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def capture_logs():
    """Attach a recording handler to a named logger; loggers here do not propagate."""
    attached = []

    def attach(name):
        handler = RecordingHandler()
        logger = logging.getLogger(name)
        logger.addHandler(handler)
        attached.append((logger, handler))
        return handler.records

    yield attach
    for logger, handler in attached:
        logger.removeHandler(handler)
