"""Business logic services."""

from .chat import ChatService
from .model import ModelService
