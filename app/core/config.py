"""Application configuration."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    APP_NAME: str = Field(default="Copywriter Chat Relay", env="APP_NAME")
    DOCS_PORT: int = Field(default=8000, env="DOCS_PORT")

    # Anthropic settings
    ANTHROPIC_API_KEY: Optional[str] = Field(default=None, env="ANTHROPIC_API_KEY")
    ANTHROPIC_MODEL: str = Field(
        default="claude-3-sonnet-20240229", env="ANTHROPIC_MODEL"
    )

    # Model settings
    MODEL_MAX_TOKENS: int = Field(default=4096, env="MODEL_MAX_TOKENS", ge=1)
    MODEL_TEMPERATURE: float = Field(
        default=0.7, env="MODEL_TEMPERATURE", ge=0, le=1
    )

    # CORS settings
    CORS_ORIGINS: list[str] = Field(default=["*"], env="CORS_ORIGINS")

    # Environment
    ENVIRONMENT: str = Field(default="development", env="ENVIRONMENT")
    LOG_LEVEL: str = Field(default="INFO", env="LOG_LEVEL")
    DEBUG: bool = Field(default=True, env="DEBUG")

    @property
    def has_api_key(self) -> bool:
        """Whether the upstream credential is present."""
        return bool(self.ANTHROPIC_API_KEY and self.ANTHROPIC_API_KEY.strip())

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process settings."""
    return settings
