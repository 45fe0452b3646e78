"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.errors import setup_exception_handlers
from forum.interface.api.routes import comments, health, likes, users
from forum.util.di.container import create_container, setup_di
from forum.util.error import ConfigurationError
from forum.util.observability import instrument_fastapi
from forum.util.scheduler import DailyTrigger, run_deletion_sweep

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> None:
    """Refuse to start with settings that are unsafe for the environment.

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container when omitted.
            Tests pass a container built from mock providers.
    """
    settings = Settings()
    check_settings(settings)

    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        trigger: DailyTrigger | None = None
        if settings.scheduler.enabled:
            trigger = DailyTrigger(
                "account_deletion_sweep",
                lambda: run_deletion_sweep(container),
                hour=settings.scheduler.run_at_hour,
                minute=settings.scheduler.run_at_minute,
            )
            trigger.start()
        try:
            yield
        finally:
            if trigger is not None:
                await trigger.stop()
            await container.close()

    app_instance = FastAPI(
        title="Forum API",
        description="Backend API for the community forum: accounts, comments and likes",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)
    setup_exception_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
