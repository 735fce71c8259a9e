"""Health check module for application monitoring."""

from app.core.config import Settings


def get_health_status(settings: Settings):
    """
    Get health status response.

    Args:
        settings: Settings used to report upstream configuration
    """
    return {
        "message": "Service is healthy",
        "data": {
            "status": "healthy",
            "app": settings.APP_NAME,
            "upstream": "configured" if settings.has_api_key else "not_configured",
        },
    }
