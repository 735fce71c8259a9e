"""LLM model service for text generation."""

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models.chat_models import BaseChatModel

from app.core.config import Settings
from app.core.exceptions import ConfigurationError, UpstreamError
from app.core.logging import setup_logger

logger = setup_logger(__name__)


class ModelService:
    """Service for LLM text generation."""

    def __init__(self, settings: Settings) -> None:
        """Initialize model service with an explicit configuration."""
        self._settings = settings
        self._model = None

    @property
    def settings(self) -> Settings:
        """Settings this service was built from."""
        return self._settings

    def get_model(self) -> BaseChatModel:
        """
        Get the LLM model instance.

        Raises:
            ConfigurationError: If ANTHROPIC_API_KEY is not set. No client is created.
            UpstreamError: If the client cannot be constructed.
        """
        if not self._settings.has_api_key:
            raise ConfigurationError("ANTHROPIC_API_KEY is not set")
        if self._model is None:
            self._model = self._create_anthropic_model()
        return self._model

    def _create_anthropic_model(self) -> BaseChatModel:
        """Create Anthropic chat model instance."""
        try:
            logger.info(
                f"Initializing Anthropic chat model: model={self._settings.ANTHROPIC_MODEL}, "
                f"max_tokens={self._settings.MODEL_MAX_TOKENS}, "
                f"temperature={self._settings.MODEL_TEMPERATURE}"
            )

            return ChatAnthropic(
                model=self._settings.ANTHROPIC_MODEL,
                max_tokens=self._settings.MODEL_MAX_TOKENS,
                temperature=self._settings.MODEL_TEMPERATURE,
                api_key=self._settings.ANTHROPIC_API_KEY,
            )

        except Exception as e:
            raise UpstreamError(f"Failed to initialize Anthropic model: {str(e)}") from e
