"""FastAPI dependency injection functions."""

from .get_chat_service import get_chat_service, get_model_service

__all__ = [
    "get_chat_service",
    "get_model_service",
]
