"""Quick-start prompt picker."""

from typing import Callable, Sequence, Tuple

from app.models.quick_start import QuickStartCard

QUICK_START_CARDS: Tuple[QuickStartCard, ...] = (
    QuickStartCard(
        icon="pen-tool",
        label="Website Copy",
        prompt="Can you help me write compelling website copy? My business focuses on [please specify your industry and target audience].",
    ),
    QuickStartCard(
        icon="message-circle",
        label="Social Media Captions",
        prompt="I need engaging social media captions for my posts about [mention topic or product]. Can you provide some creative options?",
    ),
    QuickStartCard(
        icon="file-text",
        label="Email Marketing",
        prompt="Can you draft a high-converting email for my campaign? The goal is [e.g., lead generation, sales, engagement].",
    ),
    QuickStartCard(
        icon="book-open",
        label="Blog Content",
        prompt="I need a blog post on [mention topic]. Can you help structure and write an engaging piece?",
    ),
)


class QuickStartPicker:
    """Maps a selected card to a call of the container's callback."""

    def __init__(
        self,
        on_select: Callable[[str], None],
        cards: Sequence[QuickStartCard] = QUICK_START_CARDS,
    ) -> None:
        self._on_select = on_select
        self.cards = cards

    def select(self, index: int) -> None:
        """Invoke the callback with the prompt of the card at ``index``."""
        if index < 0:
            raise IndexError(f"Quick-start card index out of range: {index}")
        self._on_select(self.cards[index].prompt)
