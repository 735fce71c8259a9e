"""Request, response and UI models."""

from .chat import ChatRequest, ErrorResponse, IncomingMessage, Message
from .quick_start import QuickStartCard

__all__ = ["ChatRequest", "ErrorResponse", "IncomingMessage", "Message", "QuickStartCard"]
