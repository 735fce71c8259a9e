"""Dependency injection functions for chat service."""

from fastapi import Depends, Request

from app.core.config import Settings, get_settings
from app.services.chat import ChatService
from app.services.model import ModelService


def get_model_service(
    request: Request, settings: Settings = Depends(get_settings)
) -> ModelService:
    """
    Get the application's model service.

    One instance is kept on ``app.state`` so the upstream client and its HTTP
    connection pool are reused across requests. It is rebuilt only when a
    different settings object is injected.
    """
    service = getattr(request.app.state, "model_service", None)
    if service is None or service.settings is not settings:
        service = ModelService(settings)
        request.app.state.model_service = service
    return service


def get_chat_service(
    model_service: ModelService = Depends(get_model_service),
) -> ChatService:
    """Get chat service instance with injected model service."""
    return ChatService(model_service=model_service)
