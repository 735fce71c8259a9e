"""Quick-start prompt API endpoints."""

from typing import List

from fastapi import APIRouter

from app.models.quick_start import QuickStartCard
from app.ui.quick_start import QUICK_START_CARDS

router = APIRouter(tags=["quick-start"], prefix="/api")


@router.get("/quick-start", response_model=List[QuickStartCard])
async def list_quick_start_cards() -> List[QuickStartCard]:
    """List the canned prompts shown on the empty chat screen."""
    return list(QUICK_START_CARDS)
