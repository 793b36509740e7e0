"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from intake_metrics.api.metrics import router as metrics_router
from intake_metrics.app_logging import configure_logging
from intake_metrics.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = app.state.container.settings
        logger.info(
            "Starting intake metrics API (environment=%s, timezone=%s)",
            settings.environment,
            settings.timezone,
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(metrics_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
