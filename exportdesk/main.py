"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exportdesk.config import get_settings
from exportdesk.infrastructure.dependencies import build_screen_registry
from exportdesk.infrastructure.logging.log_config import setup_logging
from exportdesk.infrastructure.session import load_request_context
from exportdesk.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: resolve the session, build screens, share one HTTP client."""
    settings = get_settings()
    setup_logging(settings)

    # 1. Credential, once per process
    context = load_request_context(settings)

    # 2. One pooled client for every backend call
    http_client = httpx.AsyncClient(timeout=settings.request_timeout)

    # 3. One controller per catalog screen
    app.state.screens = build_screen_registry(settings, context, http_client)

    yield

    # Shutdown
    await http_client.aclose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "exportdesk.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
