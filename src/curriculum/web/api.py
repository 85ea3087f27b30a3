"""FastAPI application factory.

Main entry point for the Curriculum Setup Web API.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from curriculum.config.app_config import load_app_config
from curriculum.web.routes import (
    health_router,
    languages_router,
    profiles_router,
    reports_router,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan context manager for startup/shutdown events."""
    config = load_app_config()
    logger.info(
        "api_startup",
        languages_file=str(config.storage.languages_path.absolute()),
        profiles_file=str(config.storage.profiles_path.absolute()),
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI app instance
    """
    app = FastAPI(
        title="Curriculum Setup API",
        description="Web API for programming languages and student profiles",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(languages_router)
    app.include_router(profiles_router)
    app.include_router(reports_router)

    return app


# Default app instance for ASGI servers
app = create_app()
