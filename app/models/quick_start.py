"""Quick-start card models."""

from pydantic import BaseModel, ConfigDict, Field


class QuickStartCard(BaseModel):
    """A canned prompt shown on the empty chat screen."""

    model_config = ConfigDict(frozen=True)

    icon: str = Field(..., description="Icon name rendered on the card")
    label: str = Field(..., description="Short card title")
    prompt: str = Field(
        ...,
        description="Prompt template passed to the chat input, bracketed placeholders included",
    )
