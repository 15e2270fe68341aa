"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from thirdlogin.config import Settings
from thirdlogin.domain.service import wait_for_notifications
from thirdlogin.interface.api.routes import health, thirdlogin
from thirdlogin.util.di.container import create_container
from thirdlogin.util.logging import setup_logging
from thirdlogin.util.observability import (
    instrument_fastapi,
    instrument_httpx,
    instrument_redis,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Drain background notifications, then close the DI container."""
    yield
    await wait_for_notifications()
    await app.state.dishka_container.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()
    setup_logging(settings)

    # Instrument outbound clients
    # (Logfire must be configured before instrumentation)
    instrument_httpx()
    instrument_redis()

    app_instance = FastAPI(
        title="Third-Party Login API",
        description="Third-party OAuth login handshake and account provisioning",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    setup_dishka(create_container(), app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(thirdlogin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
