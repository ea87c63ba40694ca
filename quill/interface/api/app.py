"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quill import __version__
from quill.application.usecase.auth import EnsureAdminUserUseCase
from quill.config import Settings
from quill.interface.api.errors import register_exception_handlers
from quill.interface.api.routes import auth, contact, health, posts
from quill.util.di.container import create_container, setup_di
from quill.util.observability import instrument_fastapi

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed the admin account on startup and close the container on shutdown."""
    container: AsyncContainer = app.state.dishka_container

    async with container() as request_container:
        ensure_admin = await request_container.get(EnsureAdminUserUseCase)
        await ensure_admin.execute()

    yield

    await container.close()
    logfire.info("Application shut down")


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it without sending anything.

    Args:
        container: DI container to use. Defaults to the production container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Quill API",
        description="Backend API for a personal blog with a contact form",
        version=__version__,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_exception_handlers(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router, prefix=API_PREFIX)
    app_instance.include_router(auth.router, prefix=API_PREFIX)
    app_instance.include_router(posts.router, prefix=API_PREFIX)
    app_instance.include_router(contact.router, prefix=API_PREFIX)

    return app_instance
