"""Health check API endpoints."""

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.health import get_health_status

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Reports whether the upstream credential is configured. The upstream model
    is never called.
    """
    return get_health_status(settings)
