"""
FastAPI Application
===================

Main FastAPI app setup with routes, error handlers and startup seeding.
Startup: build container → seed users (if enabled) → serve requests
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.staticfiles import StaticFiles

from users_api.api.error_handlers import setup_error_handling
from users_api.api.v1 import user_router
from users_api.application.use_cases.seed_users import SeedUsersUseCase
from users_api.core.config import Settings, get_settings
from users_api.di.container import DIContainer, build_container

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - The dependency container (built from settings unless one is passed in)
    - Error handlers mapping failures to ``{"error": ...}`` bodies
    - API route registration
    - Startup seeding and shutdown cleanup
    - Optional static frontend served at "/"

    Args:
        settings: Application settings; loaded from the environment if omitted
        container: Pre-built container, e.g. one backed by the in-memory repository

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = container.settings if container is not None else get_settings()
    if container is None:
        container = build_container(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        """
        Seed the user collection before the server accepts traffic and
        release database connections on shutdown.
        """
        if settings.seed_on_startup:
            seed = container.get(SeedUsersUseCase)
            await run_in_threadpool(seed.execute)
        else:
            logger.info("Seeding disabled")

        yield

        container.close()
        logger.info("Users API stopped")

    application = FastAPI(
        lifespan=lifespan,
        title="Users API",
        description="CRUD API for the user collection",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.settings = settings
    application.state.container = container

    setup_error_handling(application)

    # Register API routers
    application.include_router(user_router, prefix="/api/users")

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    # Mounted last so API routes take precedence
    if settings.static_directory and os.path.isdir(settings.static_directory):
        application.mount(
            "/",
            StaticFiles(directory=settings.static_directory, html=True),
            name="static",
        )
        logger.info("Serving static files from %s", settings.static_directory)

    return application
