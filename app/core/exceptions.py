"""Custom exception classes."""

from typing import Any, Dict, Optional


class ChatRelayException(Exception):
    """Base exception for the chat relay application."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(ChatRelayException):
    """Request body could not be parsed into a conversation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, status_code=500, details=details)


class ConfigurationError(ChatRelayException):
    """Required configuration is missing."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, status_code=500, details=details)


class UpstreamError(ChatRelayException):
    """Upstream model call could not be started."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, status_code=500, details=details)
