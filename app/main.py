"""Main FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import chat, health, quick_start
from app.core.config import settings
from app.core.exceptions import ChatRelayException
from app.core.logging import setup_logger
from app.models.chat import ErrorResponse

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting Copywriter Chat Relay, version={app.version}")
    if not settings.has_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set; chat requests will fail")

    yield

    # Shutdown
    logger.info("Shutting down Copywriter Chat Relay")


async def chat_relay_exception_handler(
    request: Request, exc: ChatRelayException
) -> JSONResponse:
    """Render relay errors as the standard error body."""
    logger.error(
        f"AI API Error on {request.url.path}: {exc.message} details={exc.details}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(details=exc.message).model_dump(),
    )


def create_application() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Copywriting assistant chat relay",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc" if settings.DEBUG else None,
        servers=[
            {
                "url": f"http://localhost:{settings.DOCS_PORT}",
                "description": "Local Enviroment",
            }
        ],
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ChatRelayException, chat_relay_exception_handler)

    # Include API routers
    app.include_router(health.router)
    app.include_router(chat.router)
    app.include_router(quick_start.router)

    return app


app = create_application()
